"""Scan state of the checklink report parser."""

from dataclasses import dataclass

from .LinkIssue import LinkIssue


@dataclass(frozen=True)
class ReportScanState:
    """State threaded through the line scanner.

    Attributes:
        current_source: Target of the last ``Processing`` header
        in_issues: Inside the "List of broken links and other issues" section
        in_fragments: Inside the "fragments need to be fixed" list of the open issue
        open_issue: Issue being built
        issues: Issues completed so far, in report order
    """

    current_source: str | None = None
    in_issues: bool = False
    in_fragments: bool = False
    open_issue: LinkIssue | None = None
    issues: tuple[LinkIssue, ...] = ()

    def flushed(self) -> "ReportScanState":
        """Move the open issue, if any, to ``issues``."""
        if self.open_issue is None:
            return self
        return ReportScanState(
            current_source=self.current_source,
            in_issues=self.in_issues,
            in_fragments=self.in_fragments,
            open_issue=None,
            issues=self.issues + (self.open_issue,),
        )
