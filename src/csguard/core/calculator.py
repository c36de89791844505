"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/calculator.py
Turns scanned files into a path -> digest mapping.
"""

import logging
import os
from typing import Iterable, Optional

from csguard.core.hasher import HasherImpl
from csguard.core.models import AlgorithmId, ChecksumSet, ScannedFile

logger = logging.getLogger(__name__)


class ChecksumCalculatorImpl:
    """
    Computes digests for scanned files. I/O errors are not caught here:
    the first failing file ends the calculation.
    """

    def __init__(self, hasher: HasherImpl):
        self.hasher = hasher

    @property
    def algorithm(self) -> AlgorithmId:
        return self.hasher.algorithm

    def compute_file(self, path: str, size: Optional[int] = None) -> str:
        """Hashes one file with the size-appropriate strategy, stat-ing it when size is unknown."""
        if size is None:
            size = os.stat(path).st_size
        return self.hasher.compute(path, size)

    def calculate(self, files: Iterable[ScannedFile]) -> ChecksumSet:
        """
        Hash every file and return a new mapping.
        Later entries overwrite earlier ones for the same path.
        """
        result: ChecksumSet = {}
        for file in files:
            result[file.path] = self.compute_file(file.path, file.size)
        logger.debug(f"Calculated {len(result)} checksums with {self.algorithm.display_name}")
        return result
