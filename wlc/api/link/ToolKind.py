"""How the checklink tool was found."""

from enum import Enum


class ToolKind(str, Enum):
    EXPLICIT = "explicit"
    PATH = "path"
    CONTAINER = "container"
