import os
import sys
import warnings
from collections.abc import Iterable
from enum import Enum
from functools import lru_cache
from typing import TYPE_CHECKING, Optional

from attrs import define, field

from flagset.config import ConfigSource
from flagset.exceptions import FlagsetError
from flagset.kind import Kind
from flagset.help import default_prog, format_help, help_print
from flagset.option import Cell
from flagset.parser import Parser, Positionals
from flagset.registry import Registry
from flagset.utils import normalize_tokens, to_tuple_converter

if TYPE_CHECKING:
    from rich.console import Console
    from rich.panel import Panel


class TestFramework(str, Enum):
    UNKNOWN = ""
    PYTEST = "pytest"


@lru_cache
def _detect_test_framework() -> TestFramework:
    """Detects if we are currently being ran in a test framework."""
    # PYTEST_VERSION is set as of pytest v8.2.0
    if "pytest" in sys.modules and os.environ.get("PYTEST_VERSION") is not None:
        return TestFramework.PYTEST
    else:
        return TestFramework.UNKNOWN


@lru_cache  # Prevent logging of multiple warnings
def _log_framework_warning(framework: TestFramework) -> None:
    """Catch tests that invoke :meth:`FlagSet.parse` without tokens and end up reading :obj:`sys.argv`."""
    if framework == TestFramework.UNKNOWN:
        return
    message = f'FlagSet.parse invoked without tokens under unit-test framework "{framework.value}". Did you mean "parse([])"?'
    warnings.warn(UserWarning(message), stacklevel=3)


@define
class FlagSet:
    """A program's declared options together with the parser that fills them in.

    Parameters
    ----------
    name: str | None
        Program name shown in help. Defaults to the basename of ``sys.argv[0]``.
    registry: Registry
        Option declarations; a fresh, empty one by default.
    config: ConfigSource | Iterable[ConfigSource]
        Sources (e.g. :class:`~flagset.config.Env`) applied in order before parsing.
    print_error: bool
        Print a rich-formatted error on parsing errors.
    exit_on_error: bool
        Invoke ``sys.exit(1)`` on parsing errors. Otherwise the exception is re-raised.
    verbose: bool
        Populate exception strings with more information intended for developers.
    """

    name: str | None = None
    registry: Registry = field(factory=Registry, kw_only=True)
    config: tuple[ConfigSource, ...] = field(default=(), converter=to_tuple_converter, kw_only=True)
    print_error: bool = field(default=True, kw_only=True)
    exit_on_error: bool = field(default=True, kw_only=True)
    verbose: bool = field(default=False, kw_only=True)
    _console: Optional["Console"] = field(default=None, alias="console", kw_only=True)
    _error_console: Optional["Console"] = field(default=None, alias="error_console", kw_only=True)
    _parser: Parser = field(init=False)

    def __attrs_post_init__(self):
        self._parser = Parser(self.registry)

    @property
    def prog(self) -> str:
        return self.name if self.name is not None else default_prog()

    @property
    def console(self) -> "Console":
        if self._console is None:
            from rich.console import Console

            self._console = Console()
        return self._console

    @console.setter
    def console(self, console: Optional["Console"]):
        self._console = console

    @property
    def error_console(self) -> "Console":
        if self._error_console is None:
            from rich.console import Console

            self._error_console = Console(stderr=True)
        return self._error_console

    @error_console.setter
    def error_console(self, console: Optional["Console"]):
        self._error_console = console

    def declare_bool(self, name: str, default: bool, usage: str) -> Cell:
        return self.registry.declare_bool(name, default, usage, stacklevel=2)

    def declare_int(self, name: str, default: int, usage: str) -> Cell:
        return self.registry.declare_int(name, default, usage, stacklevel=2)

    def declare_string(self, name: str, default: str, usage: str) -> Cell:
        return self.registry.declare_string(name, default, usage, stacklevel=2)

    def parse(
        self,
        tokens: None | str | Iterable[str] = None,
        *,
        error_console: Optional["Console"] = None,
        print_error: bool | None = None,
        exit_on_error: bool | None = None,
        verbose: bool | None = None,
    ) -> Positionals:
        """Apply configuration sources, then CLI ``tokens``, to the declared options.

        Parameters
        ----------
        tokens: None | str | Iterable[str]
            Either a string, or a list of strings.
            Defaults to ``sys.argv[1:]``.
        error_console: ~rich.console.Console
            Console to print error messages. Defaults to :attr:`error_console`.
        print_error: bool | None
            Print a rich-formatted error on error.
            If :obj:`None`, inherits from :attr:`FlagSet.print_error`.
        exit_on_error: bool | None
            If there is an error parsing the CLI tokens invoke ``sys.exit(1)``.
            Otherwise, continue to raise the exception.
            If :obj:`None`, inherits from :attr:`FlagSet.exit_on_error`.
        verbose: bool | None
            If :obj:`None`, inherits from :attr:`FlagSet.verbose`.

        Returns
        -------
        Positionals
            Tokens not consumed by any option.
        """
        if tokens is None:
            _log_framework_warning(_detect_test_framework())

        tokens = normalize_tokens(tokens)

        try:
            for source in self.config:
                source(self.registry)
            return self._parser.parse(tokens)
        except FlagsetError as e:
            e.verbose = self.verbose if verbose is None else verbose
            e.root_input_tokens = tokens
            if e.console is None:
                e.console = self.error_console if error_console is None else error_console
            if self.print_error if print_error is None else print_error:
                e.console.print(self._error_panel(e))
            if self.exit_on_error if exit_on_error is None else exit_on_error:
                sys.exit(1)
            raise

    def _help_hint(self) -> str:
        """Pointer to the program's own help option, if it declares one."""
        for name in ("help", "h"):
            option = self.registry.lookup(name)
            if option is not None and option.kind is Kind.BOOL:
                return f'Run "{self.prog} {option.dashed}" for usage.'
        return ""

    def _error_panel(self, error: FlagsetError) -> "Panel":
        from rich import box
        from rich.panel import Panel
        from rich.text import Text

        body = Text(str(error), "default")
        if hint := self._help_hint():
            body.append("\n" + hint, "dim")
        return Panel(body, title="Error", style="red", box=box.ROUNDED, expand=True, title_align="left")

    @property
    def positionals(self) -> Positionals:
        """Positional arguments of the most recent :meth:`parse`."""
        return self._parser.positionals

    def positional_count(self) -> int:
        return self.positionals.count()

    def positional_at(self, index: int) -> str:
        return self.positionals.at(index)

    def format_help(self) -> str:
        return format_help(self.registry, self.prog)

    def help_print(self, console: Optional["Console"] = None) -> None:
        """Print the help listing.

        Parameters
        ----------
        console: ~rich.console.Console
            Console to print to. Defaults to :attr:`console`.
        """
        help_print(self.registry, self.prog, console=self.console if console is None else console)
