from collections.abc import Iterable, Iterator

from attrs import define, field

from flagset._convert import convert
from flagset.exceptions import (
    CombinedShortOptionError,
    MissingArgumentError,
    PositionalIndexError,
    UnknownOptionError,
)
from flagset.registry import Registry
from flagset.utils import is_flag_token, split_flag_token


@define
class Positionals:
    """Tokens that were neither an option nor an option's value, in command-line order."""

    _tokens: list[str] = field(factory=list, converter=list)

    def append(self, token: str) -> None:
        self._tokens.append(token)

    def count(self) -> int:
        return len(self._tokens)

    def at(self, index: int) -> str:
        """Bounds-checked access.

        Raises
        ------
        PositionalIndexError
            If ``index`` is negative or not less than :meth:`count`.
        """
        if not 0 <= index < len(self._tokens):
            raise PositionalIndexError(index=index, count=len(self._tokens))
        return self._tokens[index]

    def __getitem__(self, index: int) -> str:
        if not isinstance(index, int):
            raise TypeError(f"Positional indices must be integers, not {type(index).__name__}.")
        return self.at(index)

    def __len__(self) -> int:
        return len(self._tokens)

    def __iter__(self) -> Iterator[str]:
        return iter(self._tokens)

    def __eq__(self, other):
        if isinstance(other, Positionals):
            return self._tokens == other._tokens
        if isinstance(other, list):
            return self._tokens == other
        return NotImplemented

    def as_list(self) -> list[str]:
        return list(self._tokens)


@define
class Parser:
    """Single-pass command-line parser writing through to a :class:`Registry`'s value cells.

    A parser holds the positional arguments of its most recent :meth:`parse` call.
    """

    registry: Registry
    positionals: Positionals = field(factory=Positionals, init=False)

    def parse(self, tokens: Iterable[str]) -> Positionals:
        """Apply ``tokens`` to the registry.

        Parsing stops at the first error. Values applied and positionals collected
        before the error are kept.

        Parameters
        ----------
        tokens: Iterable[str]
            Command-line tokens, excluding the program name.

        Raises
        ------
        UnknownOptionError
            A flag resolved to an undeclared option name.
        CombinedShortOptionError
            More than one value-requiring option in a single flag token.
        MissingArgumentError
            A value-requiring option had no following token.
        CoercionError
            The following token could not be converted to the option's kind.

        Returns
        -------
        Positionals
            Leftover tokens; also available as :attr:`positionals`.
        """
        tokens = list(tokens)
        self.positionals = Positionals()

        i = 0
        while i < len(tokens):
            token = tokens[i]
            if not is_flag_token(token):
                self.positionals.append(token)
                i += 1
                continue

            consumed: list[str] = []  # Value-requiring options resolved from this token.
            for name in split_flag_token(token):
                option = self.registry.lookup(name)
                if option is None:
                    raise UnknownOptionError(name=name, token=token, registry=self.registry)

                if not option.requires_value:
                    option.cell.value = True
                    continue

                consumed.append(name)
                if len(consumed) > 1:
                    raise CombinedShortOptionError(token=token, names=tuple(consumed))

                i += 1
                if i >= len(tokens):
                    raise MissingArgumentError(name=name)
                option.cell.value = convert(option.kind, tokens[i], name=name)
            i += 1

        return self.positionals
