"""Shared test fixtures for sloc tests."""

import os
from pathlib import Path

import pytest


def pytest_addoption(parser):
    """Add --run-slow option for slow tests."""
    parser.addoption(
        "--run-slow",
        action="store_true",
        default=False,
        help="run slow tests",
    )


def pytest_configure(config):
    """Configure slow marker."""
    config.addinivalue_line("markers", "slow: mark test as slow to run")


def pytest_collection_modifyitems(config, items):
    """Skip slow tests unless --run-slow is given."""
    if config.getoption("--run-slow"):
        return
    skip_slow = pytest.mark.skip(reason="need --run-slow option to run")
    for item in items:
        if "slow" in item.keywords:
            item.add_marker(skip_slow)


@pytest.fixture(autouse=True)
def isolated_env(tmp_path, monkeypatch):
    """Keep the user's ~/.sloc.toml and SLOC_* variables out of tests."""
    home = tmp_path / "home"
    home.mkdir()
    monkeypatch.setenv("HOME", str(home))
    for key in list(os.environ):
        if key.startswith("SLOC_"):
            monkeypatch.delenv(key)


@pytest.fixture
def source_tree(tmp_path: Path) -> Path:
    """A small mixed-language project.

    Expected counts:
        Go:       2 files, 5 code, 2 comment, 1 blank
        GoTest:   1 file,  2 code, 1 comment, 0 blank
        Python:   1 file,  2 code, 1 comment, 1 blank
        Markdown: 1 file,  1 code, 0 comment, 1 blank
    """
    root = tmp_path / "project"
    root.mkdir()

    (root / "main.go").write_bytes(
        b"package main\n"
        b"\n"
        b"// main entry\n"
        b"func main() {}\n"
        b"var x = 1\n"
    )
    (root / "main_test.go").write_bytes(
        b"package main\n"
        b"/* tests */\n"  # closes on its own line: code
        b"func TestX() {} // ok\n"
    )

    pkg = root / "pkg"
    pkg.mkdir()
    (pkg / "util.py").write_bytes(
        b"# helpers\n"
        b"import os\n"
        b"\n"
        b"print(os.sep)\n"
    )
    (root / "README.md").write_bytes(b"# Project\n\n")

    # ignored: hidden entries, unknown types, excluded subtree
    (root / ".hidden.py").write_bytes(b"x = 1\n")
    hidden_dir = root / ".git"
    hidden_dir.mkdir()
    (hidden_dir / "hook.sh").write_bytes(b"echo hi\n")
    (root / "image.png").write_bytes(b"\x89PNG\r\n")
    vendor = root / "vendor"
    vendor.mkdir()
    (vendor / ".nosloc").write_bytes(b"")
    (vendor / "lib.go").write_bytes(b"package lib\n")

    return root
