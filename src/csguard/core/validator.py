"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/validator.py
Reconciles expected checksums against the files currently on disk.

Each reference path gets one verdict:
  OK      : recomputed digest equals the expected one (case-sensitive)
  NOT OK  : digest differs
  missing : path does not exist
Directories listed in the reference set are skipped with a warning.
Any other I/O error ends the reconciliation.
"""

import logging
import os
import stat
from typing import Mapping

from csguard.core.calculator import ChecksumCalculatorImpl
from csguard.core.models import VerdictSet, Verdict

logger = logging.getLogger(__name__)


class ChecksumValidatorImpl:
    def __init__(self, calculator: ChecksumCalculatorImpl):
        self.calculator = calculator

    @staticmethod
    def compare(expected: str, actual: str) -> Verdict:
        return Verdict.OK if expected == actual else Verdict.NOT_OK

    def validate(self, reference: Mapping[str, str]) -> VerdictSet:
        """
        Args:
            reference: Expected path -> digest mapping

        Returns:
            New path -> verdict mapping keyed by the reference paths as given
        """
        verdicts: VerdictSet = {}
        for ref_path, expected in reference.items():
            path = os.path.normpath(ref_path)

            try:
                st = os.stat(path)
            except FileNotFoundError:
                logger.debug(f"Missing file: {path}")
                verdicts[ref_path] = Verdict.MISSING
                continue

            if stat.S_ISDIR(st.st_mode):
                logger.warning(f"Skipping directory in checksum list: {path}")
                continue

            algorithm = self.calculator.algorithm
            if len(expected) != algorithm.hex_length:
                logger.debug(
                    f"{path}: expected value has {len(expected)} chars, "
                    f"{algorithm.display_name} digests have {algorithm.hex_length}"
                )

            actual = self.calculator.compute_file(path, st.st_size)
            verdicts[ref_path] = self.compare(expected, actual)
            logger.debug(f"{path}: {verdicts[ref_path]}")

        return verdicts
