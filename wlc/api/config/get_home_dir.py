"""Get WLC home directory path or path under it."""

import os
from pathlib import Path

from ...constants import WLC_HOME_EXT


def get_home_dir(*parts: str) -> Path:
    """Get WLC home directory path or path under it.

    Checks the WLC_HOME environment variable first, defaults to ~/.wlc if not set.

    Args:
        *parts: Optional path components to join (e.g., "config.json")

    Returns:
        Absolute path to WLC home directory or subpath under it

    Examples:
        >>> get_home_dir()
        Path("/Users/user/.wlc")
        >>> get_home_dir("config.json")
        Path("/Users/user/.wlc/config.json")
    """
    wlc_home_env = os.environ.get("WLC_HOME")
    if wlc_home_env:
        wlc_home = Path(wlc_home_env).expanduser().resolve()
    else:
        home_env = os.environ.get("HOME")
        if home_env:
            wlc_home = Path(home_env) / WLC_HOME_EXT
        else:
            wlc_home = Path.home() / WLC_HOME_EXT

    return wlc_home / Path(*parts) if parts else wlc_home
