"""Link API domain."""

from ..schema_registry import schema_registry
from .LinkCheckOutput import LinkCheckOutput

schema_registry.register_output_schema("link", "check", LinkCheckOutput)

__all__ = ["LinkCheckOutput"]
