"""Top-level WLC configuration."""

import json
from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator

from ...constants import DEFAULT_CONTAINER_COMMAND, DEFAULT_CONTAINER_DOC_ROOT, DEFAULT_CONTAINER_IMAGE
from .get_home_dir import get_home_dir
from .normalize_base_url import normalize_base_url


class WLCConfig(BaseModel):
    """Defaults for every check, read from ``$WLC_HOME/config.json``.

    Command line options override these values.
    """

    model_config = ConfigDict(extra="forbid")

    checklink_command: str | None = Field(None, description="W3C checklink command location")
    base_url: str = Field("/", description="Serve files using alternative base url")
    container_command: str = Field(DEFAULT_CONTAINER_COMMAND, description="Container runtime used as fallback")
    container_image: str = Field(DEFAULT_CONTAINER_IMAGE, description="Image that bundles checklink and a web server")
    container_doc_root: str = Field(DEFAULT_CONTAINER_DOC_ROOT, description="Document root of the web server in the image")
    default_args: list[str] = Field(default_factory=list, description="Arguments always passed to checklink")
    ignore_robots_forbidden: bool = False
    ignore_broken_fragments: bool = False
    ignore_redirection: bool = False
    log_file: str | None = Field(None, description="Optional log file, in addition to stderr")

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        return normalize_base_url(value)

    @classmethod
    def get_home_dir(cls) -> Path:
        """Get WLC home directory based on WLC_HOME or default to ~/.wlc."""
        return get_home_dir()

    @classmethod
    def get_config_path(cls) -> Path:
        """Get path to config file based on WLC_HOME or default to ~/.wlc."""
        return cls.get_home_dir() / "config.json"

    @classmethod
    def load(cls) -> "WLCConfig":
        """Load and validate config from file.

        A missing config file is not an error: every field has a default.

        Raises:
            ValueError: If the file holds invalid JSON or fails validation
        """
        path = cls.get_config_path()

        if not path.exists():
            return cls()

        try:
            with path.open() as fh:
                raw = json.load(fh)
        except json.JSONDecodeError as e:
            raise ValueError(f"Invalid JSON in config file {path}: {e}") from e

        if not isinstance(raw, dict):
            raise ValueError(f"Config file {path} must contain a JSON object")

        try:
            return cls(**raw)
        except ValidationError as e:
            error_list = e.errors() or [{"msg": str(e), "loc": ()}]
            first = error_list[0]
            error_msg = first.get("msg", str(e))
            loc = first.get("loc", ())
            field = ".".join(str(x) for x in loc) if isinstance(loc, (list, tuple)) else ""
            detail = f"{field}: {error_msg}" if field else error_msg
            raise ValueError(f"Configuration validation error: {detail}") from e

    @property
    def log_path(self) -> Path | None:
        """Expanded log file path, if one is configured."""
        if not self.log_file:
            return None
        return Path(self.log_file).expanduser()
