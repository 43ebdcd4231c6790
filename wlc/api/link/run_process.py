"""Run the checker process while echoing its output live."""

import logging
import subprocess
import sys
import threading
from collections.abc import Callable, Sequence
from typing import IO, TextIO

from rich.console import Console

from .ProcessFailure import ProcessFailure
from .ProcessOutput import ProcessOutput

logger = logging.getLogger(__name__)

# echo(chunk, is_stderr)
Echo = Callable[[str, bool], None]


def make_console_echo(file: TextIO | None = None) -> Echo:
    """Echo chunks to ``file`` (default stdout), stderr chunks in red."""
    console = Console(file=file or sys.stdout, highlight=False, soft_wrap=True, emoji=False)

    def echo(chunk: str, is_stderr: bool) -> None:
        console.print(chunk, end="", style="red" if is_stderr else None, markup=False)

    return echo


def _pump(stream: IO[str], buffer: list[str], is_stderr: bool, echo: Echo, lock: threading.Lock) -> None:
    echoing = True
    for chunk in iter(stream.readline, ""):
        buffer.append(chunk)
        if not echoing:
            continue
        with lock:
            try:
                echo(chunk, is_stderr)
            except Exception as exc:
                # the pipe must still be drained or the child blocks
                logger.debug("echo failed, no more live output: %s", exc)
                echoing = False
    stream.close()


def run_process(command: str, args: Sequence[str], echo: Echo | None = None) -> ProcessOutput:
    """Spawn ``command`` with ``args`` and wait for it to exit.

    Each line the process writes is passed to ``echo`` as soon as it arrives
    and buffered per stream.

    Args:
        command: Executable to run
        args: Arguments for the executable
        echo: Receives ``(chunk, is_stderr)``; defaults to the console on stdout

    Returns:
        Full stdout and stderr of the process

    Raises:
        ProcessFailure: If the process cannot be spawned or exits non-zero
    """
    if echo is None:
        echo = make_console_echo()

    logger.debug("spawning %s with %d argument(s)", command, len(args))
    try:
        proc = subprocess.Popen(
            [command, *args],
            stdin=subprocess.DEVNULL,
            stdout=subprocess.PIPE,
            stderr=subprocess.PIPE,
            text=True,
            encoding="utf-8",
            errors="replace",
            bufsize=1,
        )
    except OSError as exc:
        raise ProcessFailure(command, None, reason=str(exc)) from exc

    stdout: list[str] = []
    stderr: list[str] = []
    lock = threading.Lock()
    readers = [
        threading.Thread(target=_pump, args=(proc.stdout, stdout, False, echo, lock), daemon=True),
        threading.Thread(target=_pump, args=(proc.stderr, stderr, True, echo, lock), daemon=True),
    ]
    for reader in readers:
        reader.start()

    returncode = proc.wait()
    for reader in readers:
        reader.join()

    logger.debug("%s exited with code %s", command, returncode)
    if returncode != 0:
        raise ProcessFailure(command, returncode, stderr="".join(stderr))
    return ProcessOutput(stdout="".join(stdout), stderr="".join(stderr))
