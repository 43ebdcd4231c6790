"""Raised when no checklink command can be located."""

from ...constants import CHECKLINK_COMMAND
from .LinkCheckError import LinkCheckError


class ToolNotFoundError(LinkCheckError):
    def __init__(self, command: str = CHECKLINK_COMMAND):
        self.command = command
        super().__init__(f"Failed to find w3c '{command}' command, try to specify '--checklink-command' option")
