"""Find the checklink command, or a container runtime that can run it."""

import logging
import shutil
import subprocess

from ...constants import CHECKLINK_COMMAND, DEFAULT_CONTAINER_COMMAND
from .ToolLocation import ToolLocation
from .ToolNotFoundError import ToolNotFoundError

logger = logging.getLogger(__name__)


def _probe_container_runtime(runtime: str) -> str | None:
    """Return the runtime path when ``<runtime> -v`` succeeds, None otherwise."""
    runtime_path = shutil.which(runtime)
    if not runtime_path:
        logger.debug("container runtime %r not found on PATH", runtime)
        return None
    try:
        completed = subprocess.run(
            [runtime_path, "-v"],
            capture_output=True,
            text=True,
            timeout=30,
            check=False,
        )
    except (OSError, subprocess.SubprocessError) as exc:
        logger.debug("'%s -v' failed: %s", runtime, exc)
        return None
    if completed.returncode != 0:
        logger.debug("'%s -v' exited with %s: %s", runtime, completed.returncode, completed.stderr.strip())
        return None
    logger.debug("'%s -v' succeeded with output %r", runtime, completed.stdout.strip())
    return runtime_path


def locate_tool(
    explicit_override: str | None = None,
    container_command: str = DEFAULT_CONTAINER_COMMAND,
) -> ToolLocation:
    """Locate the W3C link checker.

    Strategies, first success wins:
        1. ``explicit_override``, used verbatim without validation
        2. ``checklink`` on the search path
        3. a working container runtime

    Raises:
        ToolNotFoundError: If no strategy succeeds
    """
    if explicit_override:
        return ToolLocation.explicit(explicit_override)

    checklink_path = shutil.which(CHECKLINK_COMMAND)
    if checklink_path:
        logger.debug("found %s at %s", CHECKLINK_COMMAND, checklink_path)
        return ToolLocation.path_resolved(checklink_path)
    logger.debug("%s not found on PATH", CHECKLINK_COMMAND)

    if _probe_container_runtime(container_command):
        return ToolLocation.container(container_command)

    raise ToolNotFoundError(CHECKLINK_COMMAND)
