"""Configuration sources applied to a :class:`~flagset.registry.Registry` before parsing."""

import os
from typing import Protocol

from attrs import define, field

from flagset._convert import convert
from flagset.registry import Registry

__all__ = [
    "ConfigSource",
    "Env",
]


class ConfigSource(Protocol):
    def __call__(self, registry: Registry) -> None: ...


def _transform(s: str) -> str:
    return s.upper().replace("-", "_").replace(".", "_").lstrip("_")


@define
class Env:
    """Assign option values from environment variables.

    The variable for option ``name`` is ``prefix + NAME``, with ``-`` and ``.`` replaced by ``_``.
    Command-line tokens parsed afterwards take precedence.

    Parameters
    ----------
    prefix: str
        String prepended to every variable name, e.g. ``"MYPROG_"``.
    source: str
        Reported in conversion errors.
    """

    prefix: str = ""
    source: str = field(default="env", kw_only=True)

    def variable(self, name: str) -> str:
        """Environment variable name for option ``name``."""
        return self.prefix + _transform(name)

    def __call__(self, registry: Registry) -> None:
        for option in registry.options():
            key = self.variable(option.name)
            try:
                raw = os.environ[key]
            except KeyError:
                continue
            option.cell.value = convert(option.kind, raw, name=option.name, source=self.source, keyword=key)
