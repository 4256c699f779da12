"""Minimal ``cat`` built on flagset.

.. code-block:: console

    $ python examples/cat.py -nfp 10 notes.txt
    $ python examples/cat.py --help
"""

import sys
from pathlib import Path

from flagset import FlagSet

flags = FlagSet()
reverse = flags.declare_bool("f", False, "Print lines in reverse order")
number = flags.declare_bool("n", False, "Number output lines")
binary = flags.declare_bool("b", False, "Show each line as hex bytes")
limit = flags.declare_int("p", -1, "Print at most N lines")
show_help = flags.declare_bool("h", False, "Show this help message")
show_help_long = flags.declare_bool("help", False, "Show this help message")


def main(tokens=None):
    flags.parse(tokens)

    if show_help.value or show_help_long.value:
        flags.help_print()
        return 0

    if not flags.positional_count():
        print("Please provide a file name.", file=sys.stderr)
        return 1

    path = Path(flags.positional_at(0))
    try:
        lines = path.read_text().splitlines()
    except OSError as e:
        print(e, file=sys.stderr)
        return 1

    if reverse.value:
        lines.reverse()
    if limit.value != -1:
        lines = lines[: max(limit.value, 0)]
    for i, line in enumerate(lines, start=1):
        if binary.value:
            line = line.encode().hex(" ")
        if number.value:
            line = f"{i}\t{line}"
        print(line)
    return 0


if __name__ == "__main__":
    sys.exit(main())
