"""Shared pytest configuration and fixtures for all tests."""

import json
import logging
from pathlib import Path

import pytest


def pytest_configure(config):
    for marker in ("unit", "integration", "config"):
        config.addinivalue_line("markers", f"{marker}: {marker} tests")


def pytest_collection_modifyitems(config, items):
    """Automatically apply markers based on test file location."""
    for item in items:
        path_str = str(item.fspath)
        if "/unit/" in path_str:
            item.add_marker(pytest.mark.unit)
        elif "/integration/" in path_str:
            item.add_marker(pytest.mark.integration)


# =============================================================================
# Configuration Helpers
# =============================================================================


def minimal_config_dict() -> dict:
    """Minimal WLC configuration dict for testing."""
    return {
        "base_url": "/",
        "default_args": [],
    }


# =============================================================================
# Fixtures
# =============================================================================


@pytest.fixture(name="minimal_config_dict")
def minimal_config_dict_fixture() -> dict:
    """Pytest fixture returning a copy of the minimal config dict."""
    return minimal_config_dict().copy()


@pytest.fixture
def wlc_home(tmp_path: Path, monkeypatch) -> Path:
    """Point WLC_HOME at an empty temp directory (no config file).

    Returns:
        Path to the WLC home directory
    """
    home = tmp_path / ".wlc"
    home.mkdir()
    monkeypatch.setenv("WLC_HOME", str(home))
    return home


@pytest.fixture
def wlc_home_with_config(wlc_home: Path, minimal_config_dict: dict) -> Path:
    """Set up WLC_HOME with a minimal config file."""
    (wlc_home / "config.json").write_text(json.dumps(minimal_config_dict))
    return wlc_home


@pytest.fixture
def site_dir(tmp_path: Path) -> Path:
    """A small static site with one broken link."""
    site = tmp_path / "site"
    site.mkdir()
    (site / "index.html").write_text(
        '<html><body><a href="link-1.html">1</a><a href="link-3.html">3</a></body></html>',
        encoding="utf-8",
    )
    (site / "link-1.html").write_text("<html><body>one</body></html>", encoding="utf-8")
    return site


# =============================================================================
# Test Helpers
# =============================================================================


def run_cmd(cmd_func, *args, **kwargs):
    """Execute a cmd function and return the result with progress_callback executed."""
    result = cmd_func(*args, **kwargs)
    list(result.progress_callback(result))
    return result


def quiet_echo(chunk: str, is_stderr: bool) -> None:  # noqa: ARG001
    """Echo callback that drops process output."""


class RecordingEcho:
    """Echo callback that records ``(chunk, is_stderr)`` pairs."""

    def __init__(self):
        self.chunks: list[tuple[str, bool]] = []

    def __call__(self, chunk: str, is_stderr: bool) -> None:
        self.chunks.append((chunk, is_stderr))

    def text(self, is_stderr: bool = False) -> str:
        return "".join(chunk for chunk, err in self.chunks if err is is_stderr)


REPORT_BROKEN_LINK = """\
W3C Link Checker version 4.81 (c) 1999-2011 W3C

Processing\thttp://localhost:8000/

 Title: Test
Parsing...
done.

List of broken links and other issues:
http://localhost:8000/link-3.html
 Line: 19
 Code: 404 Not Found
To do: The link is broken. Double-check that you have not made any typo,
 or mistake in copy-pasting. If the link points to a resource that no
 longer exists, you may want to remove or fix the link.

Anchors
Found 0 anchors.
"""

REPORT_FRAGMENTS = """\
Processing\thttp://localhost:8000/

List of broken links and other issues:
http://localhost:8000/link-2.html
 Lines: 17, 18
 Code: 200 OK
To do: Some of the links to this resource point to broken URI fragments
 (such as index.html#fragment).
The following fragments need to be fixed:
 nonexists  Lines: 17, 18
 missing  Line: 21

Anchors
Found 0 anchors.
"""


@pytest.fixture
def restore_root_logger():
    """Undo ``setup_logging`` so later tests do not log into closed streams."""
    root = logging.getLogger()
    handlers, level = root.handlers[:], root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)
