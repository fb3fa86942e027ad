import os
import time

import typer

from .models import MAX_TIME_SENTINEL, Options, Stats

SIZE_UNITS: str = "BKMGTPE"


def format_size(size: int, human: bool) -> str:
    """
    Render a byte count, either as a plain integer or in 1024-based units.

    In human mode the value is divided by 1024 until it drops below 1024
    or the largest unit is reached, and shown with one decimal, e.g.
    1536 becomes "1.5K".
    """
    if not human:
        return str(size)

    value: float = float(size)
    unit: int = 0
    while value >= 1024 and unit < len(SIZE_UNITS) - 1:
        value /= 1024
        unit += 1

    return f"{value:.1f}{SIZE_UNITS[unit]}"


def _format_mtime(ts: int, path: str) -> str:
    if not path or ts == MAX_TIME_SENTINEL:
        return "n/a"
    # time.ctime always uses English day and month names
    return f"{time.ctime(ts)}  {path}"


def render_report(stats: Stats, options: Options) -> list[str]:
    human: bool = options.human
    lines: list[str] = [
        f"Directory: {stats.dir_path}",
        "",
        "General:",
        f"  Total size: {format_size(stats.total_size, human)}",
        f"  Total files: {stats.file_count}",
        f"  Total directories: {stats.dir_count}",
        f"  Empty files: {stats.empty_files}",
        f"  Non-empty files: {stats.non_empty_files}",
        f"  Empty directories: {stats.empty_dirs}",
        f"  Non-empty directories: {stats.non_empty_dirs}",
    ]

    if options.types or options.all:
        lines += [
            "",
            "Types:",
            f"  Text files: {stats.text_files}",
            f"  Binary files: {stats.binary_files}",
            f"  Script files: {stats.script_files}",
            f"  Large files (>100MB): {stats.large_files}",
        ]

    if options.size or options.all:
        lines += [
            "",
            "Sizes:",
            f"  Min file size: {format_size(stats.min_size, human)}",
            f"  Max file size: {format_size(stats.max_size, human)}",
            f"  Avg file size: {format_size(stats.average_size, human)}",
        ]

    if options.dates or options.all:
        lines += [
            "",
            "Dates:",
            f"  Oldest file: {_format_mtime(stats.oldest_time, stats.oldest_file)}",
            f"  Newest file: {_format_mtime(stats.newest_time, stats.newest_file)}",
        ]

    if options.links or options.all:
        lines += [
            "",
            "Links:",
            f"  Symbolic links: {stats.sym_links}",
            f"  Hard links: {stats.hard_links}",
        ]

    return lines


def report_command(stats: Stats, options: Options) -> None:
    """
    Print the report for a finished scan to stdout.

    Lines are written as bytes so that paths holding undecodable
    file name bytes come out exactly as they are stored on disk.
    """
    for line in render_report(stats, options):
        typer.echo(os.fsencode(line))
