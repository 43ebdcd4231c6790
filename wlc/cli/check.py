"""The ``wlc`` command: check the links of a directory or url."""

import logging
import os
import sys
from typing import Any

import typer

from wlc.api.config.WLCConfig import WLCConfig
from wlc.api.link.cmd_check import cmd_check
from wlc.api.link.run_process import make_console_echo
from wlc.cli._handle_stage_result import DISPLAY_FORMATS, _handle_stage_result
from wlc.logging_config import setup_logging
from wlc.templating import render_template

logger = logging.getLogger(__name__)

ISSUE_LISTING = """\
{{ title }} of broken links and other issues (source target lines code fragments):
{% for issue in issues %}
- {{ issue.source or "-" }} {{ issue.target or "-" }} "{{ issue.lines or "-" }}" "{{ issue.code or "-" }}" "{{ issue.fragments | join(",") if issue.fragments else "-" }}"
{% endfor %}
"""


def _listing_rows(issues: list[dict[str, Any]]) -> list[dict[str, Any]]:
    rows = []
    for issue in issues:
        fragments = issue.get("fragments") or []
        rows.append({**issue, "fragments": [f"#{fragment['hash']}" for fragment in fragments]})
    return rows


def _print_issue_listing(output: dict[str, Any]) -> None:
    """Print broken links on stderr and suppressed ones on stdout."""
    for message in output.get("warnings", []):
        typer.echo(f"Hint: {message}", err=True)

    if output.get("broken_links"):
        text = render_template(ISSUE_LISTING, {"title": "Error(s)", "issues": _listing_rows(output["broken_links"])})
        typer.echo(text, err=True, nl=False)
    if output.get("suppressed_links"):
        text = render_template(ISSUE_LISTING, {"title": "Warning(s)", "issues": _listing_rows(output["suppressed_links"])})
        typer.echo(text, nl=False)


def _configure_logging(verbose: bool) -> None:
    log_file = None
    try:
        log_file = WLCConfig.load().log_path
    except ValueError:
        # reported by cmd_check
        pass
    setup_logging(logging.DEBUG if verbose else logging.WARNING, log_file)


def check(
    ctx: typer.Context,
    target: str = typer.Argument(..., metavar="<directory|url>", help="Local directory or url to check"),
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Verbose mode"),
    no_color: bool = typer.Option(False, "--no-color", help="Disable colored output"),
    base_url: str | None = typer.Option(None, "--base-url", help="Serve files using alternative base url"),
    checklink_command: str | None = typer.Option(
        None, "--checklink-command", help="Specify W3C checklink command location"
    ),
    ignore_robots_forbidden: bool = typer.Option(
        False, "--ignore-robots-forbidden", help="Report links forbidden by robots.txt as warnings"
    ),
    ignore_broken_fragments: bool = typer.Option(
        False, "--ignore-broken-fragments", help="Report broken fragments as warnings"
    ),
    ignore_redirection: bool = typer.Option(False, "--ignore-redirection", help="Report redirections as warnings"),
    display: str = typer.Option("text", "--display", help="Output format: text, json or yaml"),
    summary: bool = typer.Option(False, "--summary", "-s", help="Result summary only"),
    broken: bool = typer.Option(False, "--broken", "-b", help="Show only the broken links, not the redirects"),
    directory: bool = typer.Option(False, "--directory", "-e", help="Hide directory redirects"),
    recursive: bool = typer.Option(False, "--recursive", "-r", help="Check the documents linked from the first one"),
    depth: int | None = typer.Option(None, "--depth", "-D", help="Check the documents up to this depth"),
    location: list[str] | None = typer.Option(None, "--location", "-l", help="Scope of the documents checked"),
    exclude: str | None = typer.Option(None, "--exclude", "-X", help="Do not check links to urls matching this regexp"),
    exclude_docs: list[str] | None = typer.Option(
        None, "--exclude-docs", help="In recursive mode, do not check links in documents matching this regexp"
    ),
    suppress_redirect: list[str] | None = typer.Option(
        None, "--suppress-redirect", help="Do not report a redirect from the first to the second url"
    ),
    suppress_redirect_prefix: list[str] | None = typer.Option(
        None, "--suppress-redirect-prefix", help="Do not report a redirect between urls with these prefixes"
    ),
    suppress_temp_redirects: bool = typer.Option(
        False, "--suppress-temp-redirects", help="Suppress warnings about temporary redirects"
    ),
    suppress_broken: list[str] | None = typer.Option(
        None, "--suppress-broken", help="Do not report a broken link with the given CODE:URL"
    ),
    suppress_fragment: list[str] | None = typer.Option(
        None, "--suppress-fragment", help="Do not report the given broken fragment URI"
    ),
    languages: str | None = typer.Option(None, "--languages", "-L", help="Accept-Language header to send"),
    cookies: str | None = typer.Option(None, "--cookies", "-c", help="Use cookies, load/save them in this file"),
    no_referer: bool = typer.Option(False, "--no-referer", "-R", help="Do not send the Referer header"),
    quiet: bool = typer.Option(False, "--quiet", "-q", help="No output if no errors are found"),
    indicator: bool = typer.Option(False, "--indicator", "-i", help="Show percentage of lines processed"),
    user: str | None = typer.Option(None, "--user", "-u", help="Specify a username for authentication"),
    password: str | None = typer.Option(None, "--password", "-p", help="Specify a password"),
    hide_same_realm: bool = typer.Option(False, "--hide-same-realm", help="Hide 401's that are in the same realm"),
    sleep: int | None = typer.Option(None, "--sleep", "-S", help="Sleep this many seconds between requests"),
    timeout: int | None = typer.Option(None, "--timeout", "-t", help="Timeout for requests in seconds"),
    connection_cache: int | None = typer.Option(
        None, "--connection-cache", "-C", help="Maximum number of cached connections"
    ),
    domain: str | None = typer.Option(None, "--domain", "-d", help="Perl regexp describing the domain of the checked urls"),
) -> None:
    """Check links of a local directory or a url with the W3C link checker.

    A local directory is served over http on a random port for the duration
    of the check.
    """
    if display not in DISPLAY_FORMATS:
        typer.echo(f"Error: --display must be one of {', '.join(DISPLAY_FORMATS)}, got '{display}'", err=True)
        raise typer.Exit(2)

    ctx.ensure_object(dict)
    ctx.obj["display_format"] = display

    if no_color:
        os.environ["NO_COLOR"] = "1"

    _configure_logging(verbose)

    options = {
        "verbose": verbose,
        "no_color": no_color,
        "base_url": base_url,
        "checklink_command": checklink_command,
        "ignore_robots_forbidden": ignore_robots_forbidden,
        "ignore_broken_fragments": ignore_broken_fragments,
        "ignore_redirection": ignore_redirection,
        "summary": summary,
        "broken": broken,
        "directory": directory,
        "recursive": recursive,
        "depth": depth,
        "location": location or None,
        "exclude": exclude,
        "exclude_docs": exclude_docs or None,
        "suppress_redirect": suppress_redirect or None,
        "suppress_redirect_prefix": suppress_redirect_prefix or None,
        "suppress_temp_redirects": suppress_temp_redirects,
        "suppress_broken": suppress_broken or None,
        "suppress_fragment": suppress_fragment or None,
        "languages": languages,
        "cookies": cookies,
        "no_referer": no_referer,
        "quiet": quiet,
        "indicator": indicator,
        "user": user,
        "password": password,
        "hide_same_realm": hide_same_realm,
        "sleep": sleep,
        "timeout": timeout,
        "connection_cache": connection_cache,
        "domain": domain,
    }
    if verbose:
        for name, value in options.items():
            logger.debug("Option %s: %r", name, "***" if name == "password" and value else value)

    # stdout carries only the structured output for json/yaml
    echo = make_console_echo(sys.stdout if display == "text" else sys.stderr)
    _handle_stage_result(cmd_check, result_printer=_print_issue_listing)(target=target, echo=echo, **options)
