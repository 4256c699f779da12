from typing import TYPE_CHECKING, Optional

from attrs import define, field

from flagset.kind import Kind
from flagset.utils import dashed

if TYPE_CHECKING:
    from rich.console import Console

    from flagset.registry import Registry


__all__ = [
    "CoercionError",
    "CombinedShortOptionError",
    "FlagsetError",
    "MissingArgumentError",
    "OptionCollisionError",
    "PositionalIndexError",
    "UnknownOptionError",
]


class OptionCollisionError(Exception):
    """An option with the same name has already been declared in a strict registry."""

    # This doesn't derive from FlagsetError since this is a developer error
    # rather than a runtime error.


@define
class FlagsetError(Exception):
    """Root exception for runtime errors.

    As FlagsetErrors bubble up to :meth:`FlagSet.parse`, more information is added to it.
    """

    msg: str | None = None
    """
    If set, override automatic message generation.
    """

    verbose: bool = False
    """
    More verbose error messages; aimed towards developers debugging their program.
    :class:`FlagSet` sets this from :attr:`FlagSet.verbose`.
    """

    root_input_tokens: list[str] | None = None
    """
    The CLI tokens that were initially fed into the parser.
    """

    console: Optional["Console"] = field(default=None, kw_only=True)
    """:class:`~rich.console.Console` to display runtime errors."""

    def __str__(self):
        if self.msg is not None:
            return self.msg

        strings = []
        if self.verbose:
            strings.append(type(self).__name__)
            if self.root_input_tokens is not None:
                strings.append(f"Root Input Tokens: {self.root_input_tokens}")

        if strings:
            return "\n".join(strings) + "\n"
        else:
            return ""


@define(kw_only=True)
class UnknownOptionError(FlagsetError):
    """Unknown/undeclared option provided by the cli.

    A nearest-neighbor option suggestion may be printed.
    """

    name: str
    """Resolved option name without a matching declaration."""

    token: str = ""
    """Flag token the name was resolved from."""

    registry: Optional["Registry"] = None
    """Registry of plausible options."""

    def __str__(self):
        response = f'Unknown option: "{dashed(self.name)}".'

        if self.registry is not None and self.name:
            import difflib

            close_matches = difflib.get_close_matches(self.name, list(self.registry), n=1, cutoff=0.6)
            if close_matches:
                response += f' Did you mean "{dashed(close_matches[0])}"?'

        return super().__str__() + response


@define(kw_only=True)
class CombinedShortOptionError(FlagsetError):
    """Cannot combine multiple short, value-consuming options in a single flag token."""

    token: str
    """Offending flag token, e.g. ``-pq``."""

    names: tuple[str, ...] = ()
    """Value-consuming option names resolved from ``token``, in order."""

    def __str__(self):
        names = ", ".join(f'"{dashed(x)}"' for x in self.names)
        return (
            super().__str__()
            + f'Cannot combine multiple options requiring a value in "{self.token}"'
            + (f": {names}." if names else ".")
        )


@define(kw_only=True)
class MissingArgumentError(FlagsetError):
    """A value-consuming option was the last token."""

    name: str
    """Option that is missing its value."""

    def __str__(self):
        return super().__str__() + f'Option "{dashed(self.name)}" requires an argument.'


@define(kw_only=True)
class CoercionError(FlagsetError):
    """A value could not be converted into the option's declared kind."""

    token: str
    """Raw value that couldn't be converted."""

    name: str | None = None
    """Option the value was intended for."""

    kind: Kind | None = None
    """Intended kind to convert into."""

    source: str = "cli"
    """Where the value came from; ``"cli"`` or a configuration source name."""

    keyword: str | None = None
    """Configuration key (e.g. environment variable) that supplied the value."""

    def __str__(self):
        if self.msg is not None:
            return self.msg

        msg = super().__str__()
        target = f'Invalid value for "{dashed(self.name)}"' if self.name else "Invalid value"
        if self.source != "cli":
            target += f" from {self.source}" + (f' "{self.keyword}"' if self.keyword else "")
        msg += f'{target}: unable to convert "{self.token}"'
        if self.kind is not None:
            msg += f" into {self.kind}"
        return msg + "."


@define(kw_only=True)
class PositionalIndexError(FlagsetError, IndexError):
    """Positional argument access out of bounds."""

    index: int
    count: int

    def __str__(self):
        return super().__str__() + f"Positional argument index {self.index} out of range; {self.count} available."
