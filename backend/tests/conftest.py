"""
Pytest configuration and shared fixtures.
"""

import stat
import sys
from pathlib import Path

import pytest

# Add backend to Python path for test imports
backend_path = Path(__file__).parent.parent
if str(backend_path) not in sys.path:
    sys.path.insert(0, str(backend_path))

from mgmtshell.config import ShellSettings  # noqa: E402

# Stand-in VSD: reports its argument count on stderr, writes noise to
# stdout, and exits non-zero.
FAKE_VSD_SCRIPT = """#!/bin/sh
echo "stdout noise"
echo "vsd: $# archive(s)" 1>&2
exit 3
"""


def pytest_configure(config):
    """Configure pytest markers."""
    config.addinivalue_line(
        "markers", "process: spawns a real child process (POSIX shell required)"
    )


@pytest.fixture
def geode_home(tmp_path: Path) -> Path:
    """Installation root containing an executable tools/vsd/bin/vsd."""
    home = tmp_path / "geode"
    bin_dir = home / "tools" / "vsd" / "bin"
    bin_dir.mkdir(parents=True)

    vsd = bin_dir / "vsd"
    vsd.write_text(FAKE_VSD_SCRIPT)
    vsd.chmod(vsd.stat().st_mode | stat.S_IXUSR | stat.S_IXGRP | stat.S_IXOTH)
    return home


@pytest.fixture
def vsd_path(geode_home: Path) -> str:
    return str(geode_home / "tools" / "vsd" / "bin" / "vsd")


@pytest.fixture
def settings(geode_home: Path) -> ShellSettings:
    return ShellSettings(geode_home=str(geode_home), member_name="locator1")


@pytest.fixture
def archive_tree(tmp_path: Path) -> Path:
    """
    data/
      a.gfs
      sub/
        b.gfs
        notes.txt
        deeper/
          c.gfs
          c.gfs.bak
    """
    data = tmp_path / "data"
    deeper = data / "sub" / "deeper"
    deeper.mkdir(parents=True)

    (data / "a.gfs").write_text("archive a")
    (data / "sub" / "b.gfs").write_text("archive b")
    (data / "sub" / "notes.txt").write_text("not an archive")
    (deeper / "c.gfs").write_text("archive c")
    (deeper / "c.gfs.bak").write_text("backup")
    return data
