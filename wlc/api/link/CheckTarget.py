"""Classify what is being checked: a local directory or a url."""

from dataclasses import dataclass
from pathlib import Path
from urllib.parse import urlsplit


@dataclass(frozen=True)
class CheckTarget:
    """A local path (absolute) or a url passed through unchanged."""

    value: str
    is_url: bool

    @staticmethod
    def looks_like_url(value: str) -> bool:
        """True when ``value`` has a scheme and a hostname, e.g. ``https://example.com/docs``."""
        try:
            parts = urlsplit(value)
            return bool(parts.scheme and parts.hostname)
        except ValueError:
            return False

    @classmethod
    def classify(cls, value: str) -> "CheckTarget":
        if cls.looks_like_url(value):
            return cls(value=value, is_url=True)
        return cls(value=str(Path(value).expanduser().resolve()), is_url=False)

    @property
    def path(self) -> Path:
        if self.is_url:
            raise ValueError(f"Target is a url, not a path: {self.value}")
        return Path(self.value)
