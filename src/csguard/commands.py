"""
Unified command orchestrator for checksum runs.
This is the SINGLE source of truth for business logic - the CLI only parses flags and prints.
"""
import logging
from typing import Mapping, Optional, TextIO

from csguard.core import codec
from csguard.core.calculator import ChecksumCalculatorImpl
from csguard.core.hasher import HasherImpl
from csguard.core.models import ChecksumParams, ChecksumSet, VerdictSet, RunMode
from csguard.core.scanner import FileScannerImpl
from csguard.core.validator import ChecksumValidatorImpl

logger = logging.getLogger(__name__)


class ChecksumCommand:
    """
    Orchestrates the checksum workflow:
    1. Configure with validated params (fail fast, before any hashing)
    2. Calculate or validate
    3. Persist the result to a file or print it as a table

    Usage:
        params = ChecksumParams(mode=RunMode.CALCULATE, input_folder="data", output="sums.json")
        command = ChecksumCommand(params)
        checksums = command.calculate()
        command.persist(checksums)
    """

    def __init__(self, params: ChecksumParams):
        params.check_paths()
        if not params.output_is_table:
            codec.detect_format(params.output, "output")
        if params.checksum_file:
            codec.detect_format(params.checksum_file, "input")
        self.params = params
        self._calculator = ChecksumCalculatorImpl(HasherImpl(params.algorithm))

    def calculate(self) -> ChecksumSet:
        """
        Hash the configured file or folder.

        Returns:
            New path -> digest mapping

        Raises:
            OSError: On the first traversal or read failure
        """
        if self.params.input_folder:
            scanner = FileScannerImpl(self.params.input_folder, recursive=True)
        else:
            scanner = FileScannerImpl(self.params.input_file)
        return self._calculator.calculate(scanner.scan())

    def load_reference(self) -> ChecksumSet:
        """
        Build the expected checksums. The checksum file is applied after the
        inline pair, so its entry wins when both name the same path.
        """
        reference: ChecksumSet = {}
        if self.params.input_file:
            reference[self.params.input_file] = self.params.checksum
        if self.params.checksum_file:
            reference.update(codec.load(self.params.checksum_file))
        return reference

    def validate(self) -> VerdictSet:
        """
        Recompute and compare every referenced path.

        Raises:
            ChecksumFormatError: If the checksum file cannot be parsed
            OSError: On any I/O failure other than a missing file
        """
        if self.params.mode != RunMode.VALIDATE:
            raise RuntimeError("validate() requires params in validate mode")
        reference = self.load_reference()
        logger.debug(f"Validating {len(reference)} entries")
        return ChecksumValidatorImpl(self._calculator).validate(reference)

    def persist(self, data: Mapping[str, object], stream: Optional[TextIO] = None) -> None:
        """Write data to the configured output, or print it as a table when none is set."""
        if self.params.output_is_table:
            codec.render_table(data, stream)
        else:
            codec.save(data, self.params.output)
