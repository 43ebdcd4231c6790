"""Translate an option set into checklink command line flags."""

from collections.abc import Mapping
from typing import Any

# Options copied to checklink as a bare ``--name`` when truthy
BOOLEAN_OPTIONS: tuple[str, ...] = (
    "summary",
    "broken",
    "directory",
    "recursive",
    "no-referer",
    "quiet",
    "verbose",
    "indicator",
    "hide-same-realm",
    "suppress-temp-redirects",
)

# Options copied as ``--name value``
SCALAR_OPTIONS: tuple[str, ...] = (
    "depth",
    "exclude",
    "user",
    "password",
    "sleep",
    "timeout",
    "languages",
    "cookies",
    "connection-cache",
    "domain",
)

# Options copied as ``--name value`` once per element
ARRAY_OPTIONS: tuple[str, ...] = (
    "location",
    "exclude-docs",
    "suppress-redirect",
    "suppress-redirect-prefix",
    "suppress-broken",
    "suppress-fragment",
)

TOOL_OPTIONS: tuple[str, ...] = BOOLEAN_OPTIONS + SCALAR_OPTIONS + ARRAY_OPTIONS


def translate_options(option_set: Mapping[str, Any]) -> list[str]:
    """Map an option set keyed by checklink flag name onto checklink arguments.

    Booleans come first, then scalars, then repeatable options, each group in
    its fixed order. Options not listed above are ignored.

    Args:
        option_set: Mapping such as ``{"recursive": True, "depth": 2, "location": [...]}``

    Returns:
        Argument list, e.g. ``["--recursive", "--depth", "2"]``
    """
    args: list[str] = []
    for name in BOOLEAN_OPTIONS:
        if option_set.get(name):
            args.append(f"--{name}")
    for name in SCALAR_OPTIONS:
        value = option_set.get(name)
        if value is not None:
            args.extend([f"--{name}", str(value)])
    for name in ARRAY_OPTIONS:
        values = option_set.get(name)
        if values is None:
            continue
        for value in values:
            args.extend([f"--{name}", str(value)])
    return args
