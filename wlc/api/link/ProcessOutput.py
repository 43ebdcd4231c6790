"""Captured output of a finished process."""

from dataclasses import dataclass


@dataclass(frozen=True)
class ProcessOutput:
    stdout: str
    stderr: str
