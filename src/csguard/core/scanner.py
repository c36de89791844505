"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/scanner.py
Enumerates the files whose checksums are calculated.
Features:
- Single-file targets yield exactly one entry
- Directory targets are walked recursively, directories themselves are skipped
- The first traversal error aborts the scan (no best-effort mode)
"""

import os
import stat
import time
import logging
from typing import Iterator, List

logger = logging.getLogger(__name__)

# Local imports
from csguard.core.models import ScannedFile
from csguard.core.interfaces import FileScanner


def _raise_walk_error(error: OSError) -> None:
    raise error


class FileScannerImpl(FileScanner):
    """
    Scans a single file or a directory tree.

    Attributes:
        target: Path of the file or directory to scan
        recursive: True if target is a directory
    """

    def __init__(self, target: str, recursive: bool = False):
        self.target = target
        self.recursive = recursive

    def scan(self) -> Iterator[ScannedFile]:
        """
        Yields (path, size) entries lazily. Any OSError raised while walking or
        stat-ing propagates to the caller and ends the scan.
        """
        if not self.recursive:
            size = os.stat(self.target).st_size
            logger.debug(f"Accepted file: {self.target} ({size} bytes)")
            yield ScannedFile(path=self.target, size=size)
            return

        root = os.path.normpath(self.target)
        root_parent = os.path.dirname(root)
        logger.debug(f"Scanning directory: {root}")
        start_time = time.time()
        processed_files = 0

        for dirpath, dirs, files in os.walk(root, onerror=_raise_walk_error):
            # Deterministic order keeps output stable between runs
            dirs.sort()
            for dirname in dirs:
                link = os.path.join(dirpath, dirname)
                if os.path.islink(link):
                    logger.debug(f"Skipping symlinked directory: {link}")
            for filename in sorted(files):
                full_path = os.path.join(dirpath, filename)
                st = os.stat(full_path)
                if not stat.S_ISREG(st.st_mode):
                    logger.debug(f"Skipping non-regular file: {full_path}")
                    continue

                # Keys keep the configured root as prefix
                path = os.path.join(root_parent, os.path.relpath(full_path, root_parent or os.curdir))
                processed_files += 1
                yield ScannedFile(path=path, size=st.st_size)

        elapsed_time = time.time() - start_time
        logger.debug(f"Scan completed. Found {processed_files} files in {elapsed_time:.2f} seconds")

    def scan_all(self) -> List[ScannedFile]:
        """Materializes the full scan result."""
        return list(self.scan())
