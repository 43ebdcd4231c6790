"""Parse the plain text report of checklink.

Report layout, per processed document::

    Processing	http://localhost:8000/
    ...
    List of broken links and other issues:
    http://localhost:8000/link-2.html
      Lines: 17, 18
      Code: 200 OK
     To do: Some of the links to this resource point to broken URI fragments
      (such as index.html#fragment).
    The following fragments need to be fixed:
      nonexists  Lines: 17, 18

    Anchors
    Found 0 anchors.

In recursive mode the last section ends with ``Checked 3 documents in ...``.
"""

import re
from dataclasses import replace
from functools import reduce

from .filter_issues import filter_issues
from .FragmentRef import FragmentRef
from .LinkIssue import LinkIssue
from .ReportScanState import ReportScanState

ISSUES_MARKER = "List of broken links and other issues"
SECTION_END_MARKER = "Anchors"
FRAGMENTS_MARKER = "The following fragments need to be fixed"

_SECTION_END_RE = re.compile(r"Found [0-9]+ anchor|Checked [0-9]+ document")
_PROCESSING_RE = re.compile(r"^Processing\s+(.+)$")
_FRAGMENT_RE = re.compile(r"^(\S+)\s+Lines?:\s+([0-9, ]+)$")

_FIELD_PREFIXES = (
    ("Line: ", "lines"),
    ("Lines: ", "lines"),
    ("Code: ", "code"),
    ("To do: ", "todo"),
)


def _is_section_end(line: str) -> bool:
    return SECTION_END_MARKER in line or _SECTION_END_RE.search(line) is not None


def _start_document(state: ReportScanState, source: str) -> ReportScanState:
    return replace(state.flushed(), current_source=source.strip(), in_issues=False, in_fragments=False)


def _scan_issue_line(state: ReportScanState, line: str) -> ReportScanState:
    issue = state.open_issue
    if issue is None:
        return state

    for prefix, field_name in _FIELD_PREFIXES:
        if line.startswith(prefix):
            return replace(state, open_issue=issue.model_copy(update={field_name: line[len(prefix):]}))

    if FRAGMENTS_MARKER in line:
        return replace(state, in_fragments=True, open_issue=issue.model_copy(update={"fragments": []}))

    if state.in_fragments:
        match = _FRAGMENT_RE.match(line)
        if not match:
            return state
        fragments = [*(issue.fragments or []), FragmentRef(hash=match.group(1), lines=match.group(2))]
        return replace(state, open_issue=issue.model_copy(update={"fragments": fragments}))

    if line:
        todo = f"{issue.todo} {line}" if issue.todo else line
        return replace(state, open_issue=issue.model_copy(update={"todo": todo}))
    return state


def scan_line(state: ReportScanState, raw_line: str) -> ReportScanState:
    """Advance the scanner by one report line. Never raises on unexpected text."""
    line = raw_line.strip()

    if state.in_issues:
        if _is_section_end(line):
            return replace(state.flushed(), in_issues=False, in_fragments=False)
        processing = _PROCESSING_RE.match(line)
        if processing:
            return _start_document(state, processing.group(1))
        if line.startswith(("http://", "https://")):
            return replace(
                state.flushed(),
                in_fragments=False,
                open_issue=LinkIssue(source=state.current_source, target=line),
            )
        if state.open_issue is None:
            return state
        return _scan_issue_line(state, line)

    if ISSUES_MARKER in line:
        return replace(state, in_issues=True)

    processing = _PROCESSING_RE.match(line)
    if processing:
        return _start_document(state, processing.group(1))
    return state


def scan_report(stdout: str | None) -> list[LinkIssue]:
    """All issues of a report, in report order."""
    state = reduce(scan_line, (stdout or "").splitlines(), ReportScanState())
    return list(state.flushed().issues)


def parse_report(
    stdout: str | None,
    ignore_robots_forbidden: bool = False,
    ignore_broken_fragments: bool = False,
    ignore_redirection: bool = False,
) -> tuple[list[LinkIssue], list[LinkIssue]]:
    """Parse a report into ``(errors, warnings)``.

    A pure function of its arguments: parsing the same text twice gives equal results.
    """
    return filter_issues(
        scan_report(stdout),
        ignore_robots_forbidden=ignore_robots_forbidden,
        ignore_broken_fragments=ignore_broken_fragments,
        ignore_redirection=ignore_redirection,
    )
