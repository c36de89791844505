"""
Shared fixtures for checksum engine tests.
Creates isolated temporary directories with controlled test files.
"""
import pytest
import tempfile
from pathlib import Path
from typing import Dict
import sys

# Add src/ to sys.path so 'csguard' is importable without installation
project_root = Path(__file__).parent.parent
sys.path.insert(0, str(project_root / "src"))

HELLO_MD5 = "5d41402abc4b2a76b9719d911017c592"


@pytest.fixture
def temp_dir():
    """Creates isolated temporary directory, auto-cleanup after test."""
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def test_files(temp_dir) -> Dict[str, Path]:
    """
    Creates a small tree:
    - root/hello.txt        ("hello")
    - root/empty.txt        (0 bytes, still checksummed)
    - root/sub/nested.bin   (binary content)
    - root/sub/deeper/x.txt ("x")
    """
    files = {}
    root = temp_dir / "root"
    (root / "sub" / "deeper").mkdir(parents=True)

    files["root"] = root
    files["hello"] = root / "hello.txt"
    files["hello"].write_bytes(b"hello")
    files["empty"] = root / "empty.txt"
    files["empty"].write_bytes(b"")
    files["nested"] = root / "sub" / "nested.bin"
    files["nested"].write_bytes(bytes(range(256)) * 4)
    files["deep"] = root / "sub" / "deeper" / "x.txt"
    files["deep"].write_bytes(b"x")

    return files
