"""Check a command's output dict against its registered schema."""

from collections.abc import Callable
from typing import Any

from pydantic import ValidationError

from .schema_registry import schema_registry


def validate_output(func: Callable, output: dict[str, Any]) -> dict[str, Any]:
    """Return ``output`` as dumped by the schema registered for ``func``.

    Output of functions without a registered schema is returned unchanged.

    Raises:
        ValueError: If ``output`` does not fit the schema
    """
    found = schema_registry.schema_for(func)
    if found is None:
        return output

    key, schema_class = found
    try:
        return schema_class(**output).model_dump(mode="python")
    except (ValidationError, TypeError) as e:
        raise ValueError(f"Output validation failed for {key}: {e}\nGot output: {output}") from e
