"""Command and arguments of one checklink run."""

from dataclasses import dataclass

# Values following these flags are hidden when an invocation is displayed
_SECRET_FLAGS = frozenset({"--password"})


@dataclass(frozen=True)
class ToolInvocation:
    command: str
    args: tuple[str, ...]

    @property
    def argv(self) -> list[str]:
        return [self.command, *self.args]

    def redacted(self) -> list[str]:
        """``argv`` with secret values replaced by ``***``."""
        shown: list[str] = []
        hide_next = False
        for arg in self.argv:
            shown.append("***" if hide_next else arg)
            hide_next = arg in _SECRET_FLAGS
        return shown

    def __str__(self) -> str:
        return " ".join(self.redacted())
