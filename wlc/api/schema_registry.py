"""Registry of the pydantic models that describe command output.

A command ``wlc.api.<domain>.cmd_<name>`` is looked up as ``(domain, name)``.
"""

from collections.abc import Callable
from typing import NamedTuple

from pydantic import BaseModel


class SchemaKey(NamedTuple):
    domain: str
    command: str

    def __str__(self) -> str:
        return f"{self.domain}.{self.command}"

    @classmethod
    def for_command(cls, func: Callable) -> "SchemaKey | None":
        """Key of an api command function, None for anything else."""
        package, _, rest = func.__module__.partition(".")
        layer, _, remainder = rest.partition(".")
        domain = remainder.split(".", 1)[0]
        if package != "wlc" or layer != "api" or not domain:
            return None
        if not func.__name__.startswith("cmd_"):
            return None
        return cls(domain, func.__name__[len("cmd_"):])


class SchemaRegistry:
    def __init__(self) -> None:
        self._schemas: dict[SchemaKey, type[BaseModel]] = {}

    def register_output_schema(self, domain: str, command_name: str, schema_class: type[BaseModel]) -> None:
        key = SchemaKey(domain, command_name)
        if key in self._schemas:
            raise ValueError(f"Schema already registered for {key}")
        self._schemas[key] = schema_class

    def get_output_schema(self, domain: str, command_name: str) -> type[BaseModel] | None:
        return self._schemas.get(SchemaKey(domain, command_name))

    def schema_for(self, func: Callable) -> tuple[SchemaKey, type[BaseModel]] | None:
        """Registered schema of a command function, with its key."""
        key = SchemaKey.for_command(func)
        if key is None or key not in self._schemas:
            return None
        return key, self._schemas[key]


schema_registry = SchemaRegistry()
