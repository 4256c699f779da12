import re
from collections.abc import Callable
from typing import Any

from flagset.exceptions import CoercionError
from flagset.kind import Kind

INT64_MIN = -(2**63)
INT64_MAX = 2**63 - 1

_int_pattern = re.compile(r"[+-]?[0-9]+")


def _bool(s: str) -> bool:
    # Mixed case such as "tRuE" is rejected.
    if s in {"1", "t", "T", "TRUE", "true", "True"}:
        return True
    elif s in {"0", "f", "F", "FALSE", "false", "False"}:
        return False
    else:
        raise ValueError


def _int(s: str) -> int:
    # ``int()`` alone would also accept whitespace and "1_000".
    if not _int_pattern.fullmatch(s):
        raise ValueError
    out = int(s)
    if not INT64_MIN <= out <= INT64_MAX:
        raise ValueError
    return out


def _str(s: str) -> str:
    return s


_converters: dict[Kind, Callable[[str], Any]] = {
    Kind.BOOL: _bool,
    Kind.INT: _int,
    Kind.STRING: _str,
}


def convert(kind: Kind, token: str, *, name: str | None = None, source: str = "cli", keyword: str | None = None):
    """Convert a raw string ``token`` into a value of ``kind``.

    Parameters
    ----------
    kind: Kind
        Declared kind of the receiving option.
    token: str
        Raw value, as typed on the command line or read from a configuration source.
    name: str | None
        Receiving option name; only used for error reporting.
    source: str
        Where ``token`` came from; only used for error reporting.
    keyword: str | None
        Configuration key that supplied ``token``; only used for error reporting.

    Raises
    ------
    CoercionError
        If ``token`` is not a valid representation of ``kind``.
    """
    try:
        return _converters[kind](token)
    except ValueError:
        raise CoercionError(token=token, name=name, kind=kind, source=source, keyword=keyword) from None
