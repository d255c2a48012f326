"""Static package metadata surfaced to CLI commands and documentation.

Values are kept in sync with ``pyproject.toml`` (verified by
``tests/test_metadata.py``) so the runtime never has to query the
installed distribution.

Contents:
    * Metadata constants (``name``, ``title``, ``version``, ...).
    * ``LAYEREDCONF_*`` identifiers used by lib_layered_config path discovery.
    * :func:`print_info` - render the metadata block for the ``info`` command.
"""

from __future__ import annotations

#: Distribution name as declared in pyproject.toml.
name = "whatif"
#: Short human-readable description shown in CLI help.
title = "Inline conditional expressions for fluent Python code"
#: Release version, bumped together with pyproject.toml.
version = "1.0.0"
#: Project page, the [project.urls] Homepage entry.
homepage = "https://pypi.org/project/whatif/"
#: Author name.
author = "whatif contributors"
#: Contact address of the author.
author_email = "whatif@example.org"
#: Console script name.
shell_command = "whatif"

#: Vendor directory used on macOS/Windows config paths.
LAYEREDCONF_VENDOR = "whatif"
#: Application directory used on macOS/Windows config paths.
LAYEREDCONF_APP = "WhatIf"
#: Slug used on Linux config paths (~/.config/<slug>/).
LAYEREDCONF_SLUG = "whatif"


def print_info() -> None:
    """Print the summary metadata block used by the CLI ``info`` command.

    Example:
        >>> print_info()  # doctest: +ELLIPSIS
        Info for whatif:
        ...
    """
    fields = [
        ("name", name),
        ("title", title),
        ("version", version),
        ("homepage", homepage),
        ("author", author),
        ("author_email", author_email),
        ("shell_command", shell_command),
    ]
    pad = max(len(label) for label, _ in fields)
    lines = [f"Info for {name}:", ""]
    lines.extend(f"    {label.ljust(pad)} = {value}" for label, value in fields)
    print("\n".join(lines))


__all__ = [
    "LAYEREDCONF_APP",
    "LAYEREDCONF_SLUG",
    "LAYEREDCONF_VENDOR",
    "author",
    "author_email",
    "homepage",
    "name",
    "print_info",
    "shell_command",
    "title",
    "version",
]
