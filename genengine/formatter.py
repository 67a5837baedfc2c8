"""Run clang-format over the C++ sources below a directory."""

from __future__ import annotations

import os
import subprocess
import sys
from dataclasses import dataclass, field
from pathlib import Path
from typing import Iterator, Optional, Sequence, TextIO

COMMAND = "clang-format"


class ParseError(Exception):
    """The command line could not be understood."""


class UsageRequested(Exception):
    """The user asked for the usage text."""


def build_usage(app_name: str) -> str:
    """Return the one-line usage text for ``app_name``."""
    return f"usage: {app_name} [-q|--quiet] [-s|--simulate] [path]"


@dataclass
class Options:
    """Command-line options of the formatter."""

    quiet: bool = False
    simulate: bool = False
    root_dir: str = "."

    def parse(self, args: Sequence[str]) -> "Options":
        """Apply ``args`` (without the program name) to these options."""
        unmatched: list[str] = []
        for arg in args:
            if arg.startswith("--"):
                self._option(arg[2:])
            elif arg.startswith("-"):
                self._short_options(arg[1:])
            else:
                unmatched.append(arg)
        if unmatched:
            if len(unmatched) > 1:
                raise ParseError(f"unexpected argument: '{unmatched[1]}'")
            self.root_dir = unmatched[0]
        return self

    def _option(self, name: str) -> None:
        if name == "quiet":
            self.quiet = True
        elif name == "simulate":
            self.simulate = True
        elif name in ("usage", "help"):
            raise UsageRequested()
        else:
            raise ParseError(f"unrecognized option: '{name}'")

    def _short_options(self, letters: str) -> None:
        for letter in letters:
            if letter == "q":
                self.quiet = True
            elif letter == "s":
                self.simulate = True
            else:
                raise ParseError(f"unrecognized option: '{letter}'")


def _walk(root: Path) -> Iterator[Path]:
    """Yield every entry below ``root`` depth-first, without following directory links."""
    with os.scandir(root) as entries:
        ordered = sorted(entries, key=lambda entry: entry.name)
    for entry in ordered:
        path = root / entry.name
        yield path
        if entry.is_dir(follow_symlinks=False):
            yield from _walk(path)


@dataclass
class SourceFormatter:
    """Finds source files and formats them in place."""

    command: str = COMMAND
    ignores: list[str] = field(default_factory=lambda: ["build/", "out/", "ext/", "cmake/"])
    extensions: list[str] = field(default_factory=lambda: [".hpp", ".cpp"])

    def available(self) -> bool:
        """Whether the formatting command can be run."""
        try:
            result = subprocess.run([self.command, "--version"], stdout=subprocess.DEVNULL, check=False)
        except OSError:
            return False
        return result.returncode == 0

    def format_file(self, path) -> bool:
        """Format one regular file in place; return whether that succeeded."""
        if not Path(path).is_file():
            return False
        try:
            result = subprocess.run([self.command, "-i", os.fspath(path)], check=False)
        except OSError:
            return False
        return result.returncode == 0

    def should_ignore(self, path) -> bool:
        text = os.fspath(path)
        return any(ignore in text for ignore in self.ignores)

    def should_format(self, path) -> bool:
        if self.should_ignore(path):
            return False
        return Path(path).suffix in self.extensions

    def run(self, options: Options, out: Optional[TextIO] = None) -> int:
        """Format every matching file below the root directory; return how many."""
        stream = out if out is not None else sys.stdout
        if not self.available():
            raise RuntimeError(f"{self.command} not available")

        if options.simulate and not options.quiet:
            stream.write("-- simulate enabled, source files will not be modified\n")

        count = 0
        if not options.quiet:
            stream.write(f"-- formatting source files in '{options.root_dir}' :\n\n")
        for path in _walk(Path(options.root_dir)):
            if not self.should_format(path):
                continue
            path_string = path.as_posix()
            if not options.quiet:
                stream.write(f"{path_string}\n")
            if options.simulate or self.format_file(path_string):
                count += 1
        if not options.quiet:
            stream.write("\n")
        stream.write(f" == {count} source files formatted\n")
        return count


def main(argv: Optional[Sequence[str]] = None) -> int:
    """Command-line entry point; ``argv`` excludes the program name."""
    usage = build_usage(Path(sys.argv[0] if sys.argv and sys.argv[0] else "formatter").name)
    args = list(sys.argv[1:] if argv is None else argv)
    options = Options()
    try:
        options.parse(args)
        if not Path(options.root_dir).is_dir():
            sys.stderr.write(f"failed to resolve root directory '{options.root_dir}'\n")
            return 1
        SourceFormatter().run(options)
    except ParseError as error:
        sys.stderr.write(f"{error}\n{usage}\n")
        return 1
    except UsageRequested:
        sys.stdout.write(f"{usage}\n")
        return 0
    except Exception as error:  # noqa: BLE001 - report any failure and exit non-zero
        sys.stderr.write(f"fatal error: {error}\n")
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())