"""Help listing: options grouped by identical usage text, sorted by name."""

import os
import sys
from collections import defaultdict
from typing import TYPE_CHECKING, Optional

from flagset.kind import Kind
from flagset.utils import dashed, frozen

if TYPE_CHECKING:
    from rich.console import Console

    from flagset.registry import Registry


@frozen(kw_only=True)
class HelpEntry:
    """One line of the help listing."""

    names: tuple[str, ...]
    """Option names sharing ``usage``, sorted."""

    kind: Kind

    usage: str

    @property
    def flags(self) -> str:
        """Dashed forms joined by commas, e.g. ``-h,--help``."""
        return ",".join(dashed(x) for x in self.names)

    def render(self, indent: str = "    ") -> str:
        return f"{indent}{self.flags}\t{self.kind}\t{self.usage}"


def format_help_entries(registry: "Registry") -> list[HelpEntry]:
    """Merge options with identical usage text into single entries.

    Entries are ordered by the lexicographically smallest name of each group.
    """
    aliases: dict[str, list[str]] = defaultdict(list)
    for name, _, usage in registry.entries():
        aliases[usage].append(name)

    entries = []
    rendered = set()
    for name in sorted(registry):
        if name in rendered:
            continue
        option = registry[name]
        names = tuple(sorted(aliases[option.usage]))
        entries.append(HelpEntry(names=names, kind=option.kind, usage=option.usage))
        rendered.update(names)
    return entries


def default_prog() -> str:
    return os.path.basename(sys.argv[0]) if sys.argv and sys.argv[0] else "program"


def format_help(registry: "Registry", prog: str | None = None) -> str:
    """Tab-separated help listing, one line per entry, preceded by a ``Usage of`` header."""
    if prog is None:
        prog = default_prog()
    lines = [f"Usage of {prog}"]
    lines.extend(entry.render() for entry in format_help_entries(registry))
    return "\n".join(lines) + "\n"


def help_print(registry: "Registry", prog: str | None = None, console: Optional["Console"] = None) -> None:
    """Write :func:`format_help` to ``console``'s file (stdout by default).

    The text bypasses rich rendering, which would expand the tab separators into spaces.
    """
    if console is None:
        from rich.console import Console

        console = Console()
    file = console.file
    file.write(format_help(registry, prog))
    file.flush()
