import os
import stat
from collections.abc import Iterator

import typer

from .classify import is_script, is_text
from .models import LARGE_FILE_THRESHOLD, Options, Stats

EXEC_BITS: int = stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH


def report_error(action: str, path: str, error: OSError, verbose: bool) -> None:
    if not verbose:
        return

    reason: str = error.strerror or str(error)
    typer.echo(os.fsencode(f"Error {action} {path}: {reason}"), err=True)


def accumulate_entry(stats: Stats, path: str, st: os.stat_result) -> None:
    """
    Fold the metadata of a single directory entry into `stats`.

    `st` must come from lstat, so that symbolic links are seen as links
    rather than as their targets. Entries that are neither regular
    files, directories nor symbolic links are ignored.
    """
    mode: int = st.st_mode

    if stat.S_ISREG(mode):
        size: int = st.st_size
        stats.file_count += 1
        stats.total_size += size

        if size == 0:
            stats.empty_files += 1
        else:
            stats.non_empty_files += 1

        if size > LARGE_FILE_THRESHOLD:
            stats.large_files += 1

        if size < stats.min_size:
            stats.min_size = size
        if size > stats.max_size:
            stats.max_size = size

        if is_text(path):
            stats.text_files += 1
            stats.text_size += size
        else:
            stats.binary_files += 1
            stats.binary_size += size

        if is_script(path):
            stats.script_files += 1
        if mode & EXEC_BITS:
            stats.exec_files += 1

        mtime: int = st.st_mtime_ns // 1_000_000_000
        if mtime < stats.oldest_time:
            stats.oldest_time = mtime
            stats.oldest_file = path
        if mtime > stats.newest_time:
            stats.newest_time = mtime
            stats.newest_file = path

    elif stat.S_ISDIR(mode):
        stats.dir_count += 1

    elif stat.S_ISLNK(mode):
        stats.sym_links += 1


def read_dir(path: str, verbose: bool) -> list[os.DirEntry[str]] | None:
    """
    Return the entries of directory `path`, or None if it cannot be opened.

    The listing is read completely and closed before returning. A read
    error part way through ends the listing, keeping the entries read
    so far.
    """
    try:
        listing = os.scandir(path)
    except OSError as e:
        report_error("opening", path, e, verbose)
        return None

    entries: list[os.DirEntry[str]] = []
    with listing:
        try:
            for entry in listing:
                entries.append(entry)
        except OSError as e:
            report_error("reading", path, e, verbose)

    return entries


def walk(root: str, stats: Stats, *, verbose: bool = False) -> None:
    """
    Depth-first walk below `root`, accumulating every entry into `stats`.

    Subdirectories are descended into as soon as they are encountered,
    before the remaining entries of their parent. The pending
    directories are kept on an explicit stack, and every listing is
    closed before its entries are visited, so neither the recursion
    limit nor the number of open file descriptors bounds the depth.
    Symbolic links are never followed.

    Directories that cannot be opened and entries that cannot be
    stat'ed are skipped; they are reported on stderr when `verbose` is
    set and never abort the walk.
    """
    root_entries: list[os.DirEntry[str]] | None = read_dir(root, verbose)
    if root_entries is None:
        return

    # one iterator per directory on the current path from root
    pending: list[Iterator[os.DirEntry[str]]] = [iter(root_entries)]

    while pending:
        entry: os.DirEntry[str] | None = next(pending[-1], None)

        if entry is None:
            _ = pending.pop()
            continue

        try:
            st: os.stat_result = entry.stat(follow_symlinks=False)
        except OSError as e:
            report_error("stating", entry.path, e, verbose)
            continue

        accumulate_entry(stats, entry.path, st)

        if stat.S_ISDIR(st.st_mode):
            children: list[os.DirEntry[str]] | None = read_dir(entry.path, verbose)
            if children is not None:
                pending.append(iter(children))


def scan_tree(root: str, options: Options) -> Stats:
    """Walk `root` and return the statistics of everything below it."""
    stats: Stats = Stats(dir_path=root)
    walk(root, stats, verbose=options.verbose)
    return stats
