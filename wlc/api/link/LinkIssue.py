"""A single broken link or redirect reported by checklink."""

from pydantic import BaseModel, ConfigDict, Field

from .FragmentRef import FragmentRef


class LinkIssue(BaseModel):
    """One issue for one target url within one processed document.

    ``fragments`` is None unless checklink listed broken anchors for the target.
    """

    model_config = ConfigDict(frozen=True)

    source: str | None = Field(None, description="Document the link was found in")
    target: str = Field(..., description="Url the link points to")
    lines: str | None = Field(None, description="Line numbers, e.g. '17, 18'")
    code: str | None = Field(None, description="Response code and text, e.g. '404 Not Found'")
    todo: str | None = Field(None, description="What checklink suggests to do")
    fragments: list[FragmentRef] | None = None

    def fragment_hashes(self) -> list[str]:
        return [f"#{fragment.hash}" for fragment in self.fragments or []]
