"""Config API module."""

from .get_home_dir import get_home_dir
from .normalize_base_url import normalize_base_url
from .WLCConfig import WLCConfig

__all__ = ["WLCConfig", "get_home_dir", "normalize_base_url"]
