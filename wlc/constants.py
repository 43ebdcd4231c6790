"""Shared constants for WLC dot-directories and external tool defaults."""

WLC_HOME_EXT = ".wlc"  # user-level config directory suffix

# Name of the W3C link checker executable searched on PATH
CHECKLINK_COMMAND = "checklink"

# Container fallback
DEFAULT_CONTAINER_COMMAND = "docker"
DEFAULT_CONTAINER_IMAGE = "jackjiaibm/w3c-linkchecker"
DEFAULT_CONTAINER_DOC_ROOT = "/usr/share/nginx/html"

# Default timestamp format for display
DEFAULT_TIMESTAMP_FORMAT = "%H:%M:%S"
