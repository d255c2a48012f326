"""Start lib_log_rich from the ``[lib_log_rich]`` configuration section.

Only the CLI shell logs. Once :func:`init_logging` has run, records from
``logging.getLogger(__name__)`` flow into lib_log_rich's console and backends.
"""

from __future__ import annotations

from typing import Any

import lib_log_rich.config
import lib_log_rich.runtime
from lib_layered_config import Config
from pydantic import BaseModel, ConfigDict

from whatif import __init__conf__


class LoggingConfigModel(BaseModel):
    """The ``[lib_log_rich]`` table as read from configuration.

    Keys other than ``service`` and ``environment`` are accepted unchecked and
    handed to ``RuntimeConfig`` as keyword arguments.

    Example:
        >>> LoggingConfigModel(service="whatif-cli").service
        'whatif-cli'
        >>> LoggingConfigModel().environment
        'prod'
    """

    model_config = ConfigDict(extra="allow")

    service: str | None = None
    environment: str = "prod"

    def runtime_kwargs(self) -> dict[str, Any]:
        """Keyword arguments for ``RuntimeConfig``, service name defaulted to the package."""
        kwargs = self.model_dump(exclude_none=True)
        kwargs["service"] = self.service or __init__conf__.name
        return kwargs


def _runtime_config(config: Config) -> lib_log_rich.runtime.RuntimeConfig:
    section = config.get("lib_log_rich", default=None) or {}
    model = LoggingConfigModel.model_validate(section)
    return lib_log_rich.runtime.RuntimeConfig(**model.runtime_kwargs())


def init_logging(config: Config) -> None:
    """Initialise lib_log_rich once per process; later calls do nothing.

    ``.env`` files are honoured so ``LOG_*`` variables take effect, and the
    stdlib ``logging`` root is attached to the runtime.
    """
    if lib_log_rich.runtime.is_initialised():
        return
    lib_log_rich.config.enable_dotenv()
    lib_log_rich.runtime.init(_runtime_config(config))
    lib_log_rich.runtime.attach_std_logging()


__all__ = ["LoggingConfigModel", "init_logging"]
