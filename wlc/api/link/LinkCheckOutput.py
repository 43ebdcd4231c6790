"""Output schema of the link check command."""

from typing import Any

from pydantic import ConfigDict, Field

from ..BaseOutputSchema import BaseOutputSchema


class LinkCheckOutput(BaseOutputSchema):
    """Output schema for link check command.

    ``errors`` and ``warnings`` carry run-level messages; link issues are in
    ``broken_links`` and ``suppressed_links``.
    """

    model_config = ConfigDict(extra="forbid")

    target: str = Field(..., description="Checked directory (absolute) or url")
    command: list[str] = Field(..., description="checklink command line, empty if it never ran")
    broken_links: list[dict[str, Any]] = Field(..., description="Issues reported as errors")
    suppressed_links: list[dict[str, Any]] = Field(..., description="Issues moved to warnings by ignore options")
