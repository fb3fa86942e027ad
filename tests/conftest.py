import errno
import os
from collections.abc import Callable
from pathlib import Path

import pytest


def write_file(path: Path, size: int = 0, mtime: int | None = None) -> Path:
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(b"x" * size)
    if mtime is not None:
        os.utime(path, (mtime, mtime))
    return path


@pytest.fixture
def sample_tree(tmp_path: Path) -> Path:
    """
    A small tree with text, binary, script and executable files, one
    nested directory and a symbolic link to a directory.
    """
    root: Path = tmp_path / "root"
    root.mkdir()

    write_file(root / "a.txt", 0, mtime=1_000)
    write_file(root / "b.bin", 200, mtime=2_000)
    write_file(root / "sub" / "tool.sh", 50, mtime=3_000).chmod(0o755)
    write_file(root / "sub" / "deeper" / "notes.MD", 10, mtime=1_500)
    (root / "link").symlink_to(root / "sub", target_is_directory=True)

    return root


@pytest.fixture
def deny_listing(monkeypatch: pytest.MonkeyPatch) -> Callable[[Path], None]:
    """
    Make one directory fail to open with EACCES, whoever runs the tests.
    """
    real_scandir = os.scandir

    def deny(denied: Path) -> None:
        def scandir(path: str) -> object:
            if os.fspath(path) == str(denied):
                raise PermissionError(errno.EACCES, "Permission denied", os.fspath(path))
            return real_scandir(path)

        monkeypatch.setattr(os, "scandir", scandir)

    return deny
