"""Unit test fixtures.

Most configuration helpers are in tests/conftest.py.
This file contains unit-test-specific helpers for patching the tool seams.
"""

import pytest

# Re-export commonly used helpers from root conftest
from tests.conftest import (
    REPORT_BROKEN_LINK,
    REPORT_FRAGMENTS,
    RecordingEcho,
    minimal_config_dict,
    quiet_echo,
    run_cmd,
)
from wlc.api.link.ProcessOutput import ProcessOutput
from wlc.api.link.ToolLocation import ToolLocation

__all__ = [
    "REPORT_BROKEN_LINK",
    "REPORT_FRAGMENTS",
    "FakeTool",
    "RecordingEcho",
    "minimal_config_dict",
    "patch_tool",
    "quiet_echo",
    "run_cmd",
]


class FakeTool:
    """Stands in for ``run_process``: records calls and replays a report."""

    def __init__(self, stdout: str = "", stderr: str = "", error: Exception | None = None):
        self.stdout = stdout
        self.stderr = stderr
        self.error = error
        self.calls: list[tuple[str, list[str]]] = []

    def __call__(self, command, args, echo=None):
        self.calls.append((command, list(args)))
        if echo is not None and self.stdout:
            echo(self.stdout, False)
        if self.error is not None:
            raise self.error
        return ProcessOutput(stdout=self.stdout, stderr=self.stderr)


def patch_tool(monkeypatch, tool: FakeTool, location: ToolLocation | None = None) -> FakeTool:
    """Patch tool lookup and process spawning in the orchestrator."""
    location = location or ToolLocation.path_resolved("/usr/bin/checklink")
    monkeypatch.setattr("wlc.api.link.LinkChecker.locate_tool", lambda *args, **kwargs: location)
    monkeypatch.setattr("wlc.api.link.LinkChecker.run_process", tool)
    return tool


@pytest.fixture
def fake_tool(monkeypatch) -> FakeTool:
    """A patched checklink that reports nothing."""
    return patch_tool(monkeypatch, FakeTool())
