"""Result of one link check."""

from typing import Any

from pydantic import BaseModel, Field

from .LinkIssue import LinkIssue


class CheckResult(BaseModel):
    """Issues found by checklink plus its raw output.

    ``warnings`` holds issues moved out of ``errors`` by the ignore options.
    """

    errors: list[LinkIssue] = Field(default_factory=list)
    warnings: list[LinkIssue] = Field(default_factory=list)
    stdout: str = ""
    stderr: str = ""

    def to_dict(self) -> dict[str, Any]:
        """Serialize, leaving out ``errors`` and ``warnings`` when empty."""
        data: dict[str, Any] = {"stdout": self.stdout, "stderr": self.stderr}
        if self.errors:
            data["errors"] = [issue.model_dump(mode="python") for issue in self.errors]
        if self.warnings:
            data["warnings"] = [issue.model_dump(mode="python") for issue in self.warnings]
        return data
