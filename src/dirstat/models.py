from dataclasses import dataclass

LARGE_FILE_THRESHOLD: int = 100 * 1024 * 1024

# Initial extrema, chosen so the first observed file always replaces them.
MAX_SIZE_SENTINEL: int = 2**64 - 1
MAX_TIME_SENTINEL: int = 2**63 - 1


@dataclass(frozen=True, slots=True)
class Options:
    types: bool = False
    size: bool = False
    permissions: bool = False
    dates: bool = False
    links: bool = False
    verbose: bool = False
    human: bool = False
    all: bool = False


@dataclass(slots=True)
class Stats:
    dir_path: str

    # General
    total_size: int = 0
    file_count: int = 0
    dir_count: int = 0
    empty_files: int = 0
    non_empty_files: int = 0
    empty_dirs: int = 0
    non_empty_dirs: int = 0

    # Types
    text_files: int = 0
    text_size: int = 0
    binary_files: int = 0
    binary_size: int = 0
    script_files: int = 0
    large_files: int = 0
    exec_files: int = 0
    recent_files: int = 0

    # Sizes
    min_size: int = MAX_SIZE_SENTINEL
    max_size: int = 0

    # Links
    sym_links: int = 0
    hard_links: int = 0

    # Dates (whole seconds since the epoch)
    oldest_time: int = MAX_TIME_SENTINEL
    oldest_file: str = ""
    newest_time: int = 0
    newest_file: str = ""

    @property
    def average_size(self) -> int:
        """Mean regular file size, or ``total_size`` when no file was seen."""
        return self.total_size // (self.file_count if self.file_count else 1)
