"""Line statistics for trees of ``.rs`` source files."""

from __future__ import annotations

import argparse
import sys
from concurrent.futures import ThreadPoolExecutor
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Union

PathLike = Union[str, Path]


class StatsError(Exception):
    """Raised when source statistics cannot be gathered."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(message)


@dataclass
class SrcStats:
    """Counts of files, code lines, comment lines and blank lines."""

    number_of_files: int = 0
    loc: int = 0
    comments: int = 0
    blanks: int = 0

    def __add__(self, other: "SrcStats") -> "SrcStats":
        return SrcStats(
            self.number_of_files + other.number_of_files,
            self.loc + other.loc,
            self.comments + other.comments,
            self.blanks + other.blanks,
        )


def _lines(text: str) -> list[str]:
    parts = text.split("\n")
    if parts[-1] == "":
        parts.pop()
    return [part[:-1] if part.endswith("\r") else part for part in parts]


def _read_text(path: Path) -> str:
    try:
        return path.read_bytes().decode("utf-8")
    except OSError as exc:
        raise StatsError(str(exc)) from exc
    except UnicodeDecodeError as exc:
        raise StatsError("stream did not contain valid UTF-8") from exc


def _tally(lines: Iterable[str], trim_indent: bool) -> SrcStats:
    stats = SrcStats()
    for line in lines:
        if not line:
            stats.blanks += 1
        elif (line.lstrip() if trim_indent else line).startswith("//"):
            stats.comments += 1
        else:
            stats.loc += 1
    return stats


def find_source_files(in_dir: PathLike) -> list[Path]:
    """Return every ``.rs`` file below ``in_dir``, searching depth first."""
    root = Path(in_dir)
    if not str(in_dir):
        raise StatsError("No such file or directory")
    pending = [root]
    found: list[Path] = []
    while pending:
        current = pending.pop()
        try:
            entries = sorted(current.iterdir())
        except OSError as exc:
            raise StatsError(str(exc)) from exc
        for entry in entries:
            if entry.is_dir():
                pending.append(entry)
            elif entry.suffix == ".rs":
                found.append(entry)
    return found


def get_src_stats_for_file(file_name: PathLike) -> SrcStats:
    """Count the lines of one file.

    Comment lines may be indented. For a single file ``number_of_files``
    holds its line count.
    """
    lines = _lines(_read_text(Path(file_name)))
    stats = _tally(lines, trim_indent=True)
    stats.number_of_files = len(lines)
    return stats


def get_summary_src_stats(in_dir: PathLike) -> SrcStats:
    """Total the line counts of every ``.rs`` file below ``in_dir``."""
    files = find_source_files(in_dir)
    total = SrcStats()
    for path in files:
        stat = get_src_stats_for_file(path)
        total.loc += stat.loc
        total.comments += stat.comments
        total.blanks += stat.blanks
    total.number_of_files = len(files)
    return total


def _directory_stats(dir_name: str) -> SrcStats:
    files = find_source_files(dir_name)
    total = SrcStats()
    for path in files:
        print(f"File name processed is {str(path)!r}")
        total = total + _tally(_lines(_read_text(path)), trim_indent=False)
    total.number_of_files = len(files)
    return total


def parallel_src_stats(dir_names: Iterable[PathLike]) -> SrcStats:
    """Gather statistics for several directory trees, one worker thread each.

    Only lines starting with ``//`` in the first column count as comments.
    """
    names = [str(name) for name in dir_names]
    if not names:
        return SrcStats()
    with ThreadPoolExecutor(max_workers=len(names)) as pool:
        results = list(pool.map(_directory_stats, names))
    return sum(results, SrcStats())


def main(argv=None) -> int:
    """Print summary statistics for a source directory."""
    parser = argparse.ArgumentParser(
        prog="rstat",
        description="This is a tool to generate statistics on Rust projects",
    )
    parser.add_argument("in_dir", metavar="source directory", type=Path)
    parser.add_argument("-m", dest="mode", required=True)
    args = parser.parse_args(argv)
    if args.mode != "src":
        print("Sorry, no stats")
        return 0
    try:
        stats = get_summary_src_stats(args.in_dir)
    except StatsError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    print(f"Summary stats: {stats!r}")
    return 0


def parallel_main(argv=None) -> int:
    """Print combined statistics for the directories listed in a file."""
    parser = argparse.ArgumentParser(prog="srcstats-parallel")
    parser.add_argument("dirnames", nargs="?", default="dirnames.txt", type=Path)
    args = parser.parse_args(argv)
    try:
        dir_names = _lines(_read_text(args.dirnames))
        stats = parallel_src_stats(dir_names)
    except StatsError as exc:
        print(f"Error: {exc.message}", file=sys.stderr)
        return 1
    print(f"Source stats: {stats!r}")
    return 0


if __name__ == "__main__":
    sys.exit(main())