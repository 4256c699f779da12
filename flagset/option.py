from typing import Any

from attrs import define, field

from flagset.kind import Kind
from flagset.utils import dashed, frozen


def _check_default(kind: Kind, value: Any) -> None:
    # ``bool`` is a subclass of ``int``; an INT option must not start out as ``True``.
    if kind is Kind.INT and isinstance(value, bool):
        raise TypeError(f"Default for an {kind} option must be an int, not {value!r}.")
    if not isinstance(value, kind.python_type):
        raise TypeError(f"Default for a {kind} option must be a {kind.python_type.__name__}, not {value!r}.")


@define
class Cell:
    """Live handle to an option's value.

    Returned by the ``declare_*`` methods; the registry holds the very same object,
    so values written while parsing are visible through it.
    """

    kind: Kind
    default: Any
    value: Any = field(init=False)

    def __attrs_post_init__(self):
        _check_default(self.kind, self.default)
        self.value = self.default

    def reset(self) -> None:
        """Restore the declared default."""
        self.value = self.default

    def __repr__(self):
        return f"Cell({self.kind}, {self.value!r})"


@frozen(kw_only=True)
class Option:
    """A single declared option."""

    name: str
    """Name as typed on the command line, without leading dashes."""

    kind: Kind

    cell: Cell = field(eq=False, hash=False)

    usage: str = ""
    """Description; options sharing identical usage are merged in help."""

    @property
    def is_short(self) -> bool:
        return len(self.name) <= 1

    @property
    def dashed(self) -> str:
        return dashed(self.name)

    @property
    def requires_value(self) -> bool:
        return self.kind.requires_value

    @property
    def value(self) -> Any:
        return self.cell.value
