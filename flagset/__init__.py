__version__ = "0.1.0"

__all__ = [
    "Cell",
    "CoercionError",
    "CombinedShortOptionError",
    "FlagSet",
    "FlagsetError",
    "HelpEntry",
    "Kind",
    "MissingArgumentError",
    "Option",
    "OptionCollisionError",
    "Parser",
    "PositionalIndexError",
    "Positionals",
    "Registry",
    "UnknownOptionError",
    "config",
    "convert",
    "format_help",
    "format_help_entries",
    "help_print",
]

from flagset import config
from flagset._convert import convert
from flagset.core import FlagSet
from flagset.exceptions import (
    CoercionError,
    CombinedShortOptionError,
    FlagsetError,
    MissingArgumentError,
    OptionCollisionError,
    PositionalIndexError,
    UnknownOptionError,
)
from flagset.help import HelpEntry, format_help, format_help_entries, help_print
from flagset.kind import Kind
from flagset.option import Cell, Option
from flagset.parser import Parser, Positionals
from flagset.registry import Registry
