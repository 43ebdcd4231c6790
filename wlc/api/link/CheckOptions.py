"""Options for a single link check."""

from typing import Any

from pydantic import BaseModel, ConfigDict, field_validator

from ..config.normalize_base_url import normalize_base_url
from ..config.WLCConfig import WLCConfig
from .translate_options import TOOL_OPTIONS

# Flags that are on when either the command line or the config file enables them
_SWITCHES = ("ignore_robots_forbidden", "ignore_broken_fragments", "ignore_redirection")


def _flag_name(field_name: str) -> str:
    return field_name.replace("_", "-")


class CheckOptions(BaseModel):
    """The option set of one run. Immutable once built.

    Field names are the Python spelling; ``model_dump(by_alias=True)`` gives
    the command line spelling (``no_referer`` -> ``no-referer``).
    """

    model_config = ConfigDict(extra="forbid", frozen=True, populate_by_name=True, alias_generator=_flag_name)

    # wlc's own options
    verbose: bool = False
    no_color: bool = False
    base_url: str = "/"
    checklink_command: str | None = None
    ignore_robots_forbidden: bool = False
    ignore_broken_fragments: bool = False
    ignore_redirection: bool = False

    # copied to checklink
    summary: bool = False
    broken: bool = False
    directory: bool = False
    recursive: bool = False
    no_referer: bool = False
    quiet: bool = False
    indicator: bool = False
    hide_same_realm: bool = False
    suppress_temp_redirects: bool = False

    depth: int | None = None
    exclude: str | None = None
    user: str | None = None
    password: str | None = None
    sleep: int | None = None
    timeout: int | None = None
    languages: str | None = None
    cookies: str | None = None
    connection_cache: int | None = None
    domain: str | None = None

    location: list[str] | None = None
    exclude_docs: list[str] | None = None
    suppress_redirect: list[str] | None = None
    suppress_redirect_prefix: list[str] | None = None
    suppress_broken: list[str] | None = None
    suppress_fragment: list[str] | None = None

    @field_validator("base_url")
    @classmethod
    def validate_base_url(cls, value: str) -> str:
        return normalize_base_url(value)

    @classmethod
    def merged(cls, config: WLCConfig, values: dict[str, Any]) -> "CheckOptions":
        """Build options from command line ``values`` on top of ``config`` defaults.

        ``None`` values mean "not given" and fall back to the config file.
        """
        data = {key: value for key, value in values.items() if value is not None}
        data.setdefault("base_url", config.base_url)
        data.setdefault("checklink_command", config.checklink_command)
        for name in _SWITCHES:
            data[name] = bool(data.get(name)) or getattr(config, name)
        return cls(**data)

    def tool_options(self) -> dict[str, Any]:
        """Options copied to checklink, keyed by checklink flag name."""
        dumped = self.model_dump(by_alias=True)
        return {name: dumped[name] for name in TOOL_OPTIONS}
