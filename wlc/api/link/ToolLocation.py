"""Where the checklink tool lives."""

from dataclasses import dataclass

from .ToolKind import ToolKind


@dataclass(frozen=True)
class ToolLocation:
    """Result of locating the tool.

    ``command`` is the checklink command for EXPLICIT and PATH, and the
    container runtime (e.g. ``docker``) for CONTAINER.
    """

    kind: ToolKind
    command: str

    @classmethod
    def explicit(cls, command: str) -> "ToolLocation":
        return cls(ToolKind.EXPLICIT, command)

    @classmethod
    def path_resolved(cls, command: str) -> "ToolLocation":
        return cls(ToolKind.PATH, command)

    @classmethod
    def container(cls, runtime: str) -> "ToolLocation":
        return cls(ToolKind.CONTAINER, runtime)

    @property
    def is_container(self) -> bool:
        return self.kind is ToolKind.CONTAINER
