"""To prevent circular dependencies, this module should never import anything else from flagset."""

import functools
import shlex
import sys
from collections.abc import Iterable
from typing import TYPE_CHECKING, Any

# https://threeofwands.com/attra-iv-zero-overhead-frozen-attrs-classes/
if TYPE_CHECKING:
    from attrs import frozen
else:
    from attrs import define

    frozen = functools.partial(define, unsafe_hash=True)


def is_iterable(obj) -> bool:
    if isinstance(obj, list | tuple | set | dict):  # Fast path for common types
        return True
    return not isinstance(obj, str) and isinstance(obj, Iterable)


def to_tuple_converter(value: None | Any | Iterable[Any]) -> tuple[Any, ...]:
    """Convert a single element or an iterable of elements into a tuple.

    Intended to be used in an ``attrs.Field``. If :obj:`None` is provided, returns an empty tuple.
    If a single element is provided, returns a tuple containing just that element.
    If an iterable is provided, converts it into a tuple.
    """
    if value is None:
        return ()
    elif is_iterable(value):
        return tuple(value)
    else:
        return (value,)


def normalize_tokens(tokens: None | str | Iterable[str]) -> list[str]:
    if tokens is None:
        tokens = sys.argv[1:]  # Remove the executable
    elif isinstance(tokens, str):
        tokens = shlex.split(tokens)
    else:
        tokens = list(tokens)
    return tokens


def is_flag_token(token: str) -> bool:
    """A lone ``-`` is not a flag token."""
    return len(token) > 1 and token[0] == "-"


def is_long_flag_token(token: str) -> bool:
    return len(token) > 2 and token[:2] == "--"


def split_flag_token(token: str) -> list[str]:
    """Resolve a flag token into the option names it refers to.

    ``--name`` names a single option. ``-abc`` is a group of single-character
    option names, evaluated left to right.
    """
    if is_long_flag_token(token):
        return [token[2:]]
    return list(token[1:])


def dashed(name: str) -> str:
    """Command-line form of an option name: ``-x`` for short names, ``--name`` otherwise."""
    if len(name) <= 1:
        return "-" + name
    return "--" + name
