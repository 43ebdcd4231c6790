"""StageResult dataclass for 4-stage command pattern."""

from collections.abc import Callable, Iterator
from dataclasses import dataclass, field


@dataclass
class StageResult:
    """What a ``cmd_*`` function hands to the display layer.

    ``progress_callback`` does the work: it yields ``(fraction, message)``
    pairs and fills in ``result``, ``output`` and ``success`` on the way.
    """

    announce: str
    progress_callback: Callable[["StageResult"], Iterator[tuple[float, str]]]
    result: str = ""
    output: dict = field(default_factory=dict)
    success: bool = False

    @property
    def exit_code(self) -> int:
        return 0 if self.success else 1
