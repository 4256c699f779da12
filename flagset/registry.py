import warnings
from collections.abc import Iterator
from typing import Any

from attrs import define, field

from flagset.exceptions import OptionCollisionError
from flagset.kind import Kind
from flagset.option import Cell, Option


@define
class Registry:
    """Mapping of option name to its declaration.

    Short (single character) and long names share a single namespace.

    Parameters
    ----------
    strict: bool
        Raise :exc:`OptionCollisionError` when a name is declared twice.
        Otherwise the later declaration replaces the former and a warning is emitted.
    """

    strict: bool = field(default=False, kw_only=True)
    _options: dict[str, Option] = field(factory=dict, init=False)

    def declare(self, name: str, kind: Kind, default: Any, usage: str, *, stacklevel: int = 1) -> Cell:
        """Declare an option and return a live handle to its value.

        Parameters
        ----------
        name: str
            Option name without leading dashes. Single-character names are short options (``-x``),
            longer names are long options (``--name``).
        kind: Kind
            Kind of the option's value.
        default: Any
            Initial value; must match ``kind``.
        usage: str
            Help text. Options with identical usage text are shown together in help.
        stacklevel: int
            Duplicate-declaration warnings are attributed to this frame; ``1`` is the caller.

        Returns
        -------
        Cell
            Handle whose ``value`` is updated by parsing.
        """
        if not name:
            raise ValueError("Option name must not be empty.")
        cell = Cell(kind, default)
        if name in self._options:
            if self.strict:
                raise OptionCollisionError(f'Option "{name}" already declared.')
            warnings.warn(
                f'Option "{name}" declared more than once; the previous declaration is replaced.',
                stacklevel=stacklevel + 1,
            )
        self._options[name] = Option(name=name, kind=kind, cell=cell, usage=usage)
        return cell

    def declare_bool(self, name: str, default: bool, usage: str, *, stacklevel: int = 1) -> Cell:
        return self.declare(name, Kind.BOOL, default, usage, stacklevel=stacklevel + 1)

    def declare_int(self, name: str, default: int, usage: str, *, stacklevel: int = 1) -> Cell:
        return self.declare(name, Kind.INT, default, usage, stacklevel=stacklevel + 1)

    def declare_string(self, name: str, default: str, usage: str, *, stacklevel: int = 1) -> Cell:
        return self.declare(name, Kind.STRING, default, usage, stacklevel=stacklevel + 1)

    def lookup(self, name: str) -> Option | None:
        """Option declared under ``name``, or :obj:`None`."""
        return self._options.get(name)

    def entries(self) -> list[tuple[str, Kind, str]]:
        """``(name, kind, usage)`` for every declared option; order is unspecified."""
        return [(x.name, x.kind, x.usage) for x in self._options.values()]

    def options(self) -> list[Option]:
        return list(self._options.values())

    def __getitem__(self, name: str) -> Option:
        return self._options[name]

    def __contains__(self, name: object) -> bool:
        return name in self._options

    def __iter__(self) -> Iterator[str]:
        return iter(self._options)

    def __len__(self) -> int:
        return len(self._options)
