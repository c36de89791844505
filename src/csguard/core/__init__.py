"""
Core checksum engine - hasher, scanner, calculator, codec and validator.

This package contains the foundation of csguard:
- HasherImpl + algorithm implementations: MD5/SHA-256/SHA-512 via hashlib
- FileScannerImpl: single-file or recursive directory traversal
- ChecksumCalculatorImpl: in-memory vs streaming hashing by file size
- codec: txt/json/yaml persistence and the write-only table rendering
- ChecksumValidatorImpl: OK / NOT OK / missing reconciliation
- Models: ChecksumParams, AlgorithmId, Verdict and friends

All components are synchronous, single-threaded and free of CLI dependencies.
"""

from .errors import ChecksumError, ConfigurationError, ChecksumFormatError
from .models import (
    AlgorithmId, Verdict, OutputFormat, RunMode, ScannedFile,
    ChecksumParams, ChecksumSet, VerdictSet)
from .hasher import HasherImpl, digest, LARGE_FILE_SIZE_THRESHOLD
from .scanner import FileScannerImpl
from .calculator import ChecksumCalculatorImpl
from .validator import ChecksumValidatorImpl

__all__ = [
    "ChecksumError",
    "ConfigurationError",
    "ChecksumFormatError",
    "AlgorithmId",
    "Verdict",
    "OutputFormat",
    "RunMode",
    "ScannedFile",
    "ChecksumParams",
    "ChecksumSet",
    "VerdictSet",
    "HasherImpl",
    "digest",
    "LARGE_FILE_SIZE_THRESHOLD",
    "FileScannerImpl",
    "ChecksumCalculatorImpl",
    "ChecksumValidatorImpl",
]
