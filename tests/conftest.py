import io

import pytest
from rich.console import Console

from flagset import FlagSet, Registry
from flagset.parser import Parser


@pytest.fixture
def registry():
    return Registry()


@pytest.fixture
def parser(registry):
    return Parser(registry)


@pytest.fixture
def console():
    return Console(width=70, force_terminal=True, highlight=False, color_system=None, legacy_windows=False)


@pytest.fixture
def flags(console):
    return FlagSet(
        "prog",
        print_error=False,
        exit_on_error=False,
        console=console,
        error_console=console,
    )


@pytest.fixture
def stdout_console():
    """Console writing to an in-memory file, for output that bypasses rich rendering."""
    return Console(file=io.StringIO(), width=70, highlight=False, color_system=None, legacy_windows=False)
