"""Move ignored issues from errors to warnings."""

import logging
from collections.abc import Iterable

from .LinkIssue import LinkIssue

logger = logging.getLogger(__name__)

ROBOTS_FORBIDDEN_MARKER = "Forbidden by robots.txt"
BROKEN_FRAGMENTS_MARKER = "broken URI fragments"
REDIRECT_MARKER = " -> "


def suppression_reason(
    issue: LinkIssue,
    ignore_robots_forbidden: bool = False,
    ignore_broken_fragments: bool = False,
    ignore_redirection: bool = False,
) -> str | None:
    """Name of the first ignore rule that matches ``issue``, or None.

    Rules match on substrings because checklink's wording varies between
    versions and messages.
    """
    if ignore_robots_forbidden and issue.code and ROBOTS_FORBIDDEN_MARKER in issue.code:
        return "robots-forbidden"
    if ignore_broken_fragments and issue.todo and BROKEN_FRAGMENTS_MARKER in issue.todo:
        return "broken-fragments"
    if ignore_redirection and issue.code and REDIRECT_MARKER in issue.code:
        return "redirection"
    return None


def filter_issues(
    issues: Iterable[LinkIssue],
    ignore_robots_forbidden: bool = False,
    ignore_broken_fragments: bool = False,
    ignore_redirection: bool = False,
) -> tuple[list[LinkIssue], list[LinkIssue]]:
    """Split ``issues`` into ``(errors, warnings)``.

    Every issue lands in exactly one list; report order is kept in both.
    """
    errors: list[LinkIssue] = []
    warnings: list[LinkIssue] = []
    for issue in issues:
        reason = suppression_reason(
            issue,
            ignore_robots_forbidden=ignore_robots_forbidden,
            ignore_broken_fragments=ignore_broken_fragments,
            ignore_redirection=ignore_redirection,
        )
        if reason is None:
            errors.append(issue)
        else:
            logger.debug("ignoring %s (%s)", issue.target, reason)
            warnings.append(issue)
    return errors, warnings
