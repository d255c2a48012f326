"""Config display wrapper: section selection, formats, and falsey values.

Rendering itself belongs to lib_layered_config; these tests check that the
wrapper forwards format, section and profile and surfaces its errors.
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any

import pytest
from lib_layered_config import Config

from whatif.adapters.config.display import display_config
from whatif.domain.enums import OutputFormat


@pytest.mark.os_agnostic
@pytest.mark.parametrize("output_format", list(OutputFormat))
def test_display_config_raises_for_nonexistent_section(
    output_format: OutputFormat,
    config_factory: Callable[[dict[str, Any]], Config],
) -> None:
    """A missing section is a ValueError in both formats."""
    config = config_factory({"whatif": {"otherwise": ""}})

    with pytest.raises(ValueError, match="not found"):
        display_config(config, output_format=output_format, section="nonexistent")


@pytest.mark.os_agnostic
def test_display_human_renders_whatif_section(capsys: pytest.CaptureFixture[str]) -> None:
    """Human output is TOML-like, with the table header and values."""
    config = Config({"whatif": {"otherwise": "n/a"}}, {})

    display_config(config, output_format=OutputFormat.HUMAN)

    output = capsys.readouterr().out
    assert "[whatif]" in output
    assert 'otherwise = "n/a"' in output


@pytest.mark.os_agnostic
def test_display_json_renders_token_lists(capsys: pytest.CaptureFixture[str]) -> None:
    """JSON output keeps token lists as arrays."""
    config = Config({"whatif": {"true_tokens": ["ja"]}}, {})

    display_config(config, output_format=OutputFormat.JSON)

    output = capsys.readouterr().out
    assert '"whatif"' in output
    assert '"ja"' in output


@pytest.mark.os_agnostic
def test_display_section_with_empty_otherwise_is_shown(capsys: pytest.CaptureFixture[str]) -> None:
    """An empty string value still counts as an existing section."""
    config = Config({"whatif": {"otherwise": ""}}, {})

    display_config(config, output_format=OutputFormat.HUMAN, section="whatif")

    assert 'otherwise = ""' in capsys.readouterr().out


@pytest.mark.os_agnostic
def test_display_json_section_with_falsey_values(capsys: pytest.CaptureFixture[str]) -> None:
    """Zero, False and empty lists are displayed, not treated as missing."""
    config = Config({"section": {"count": 0, "enabled": False, "items": []}}, {})

    display_config(config, output_format=OutputFormat.JSON, section="section")

    output = capsys.readouterr().out
    assert '"count": 0' in output
    assert '"enabled": false' in output
    assert '"items": []' in output
