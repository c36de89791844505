"""
csguard - calculate and validate file checksums.

Core features:
- MD5, SHA-256 and SHA-512 digests of a file or a whole directory tree
- Bounded memory: files above 100 MiB are streamed instead of read at once
- Checksum lists saved and loaded as txt, json or yaml
- Validation of files against expected checksums with OK / NOT OK / missing verdicts
"""

# Get version
try:
    from importlib.metadata import version as _version
    __version__ = _version("csguard")
except Exception:
    __version__ = "0.0.0"

# Public API - only what users should import directly
from csguard.commands import ChecksumCommand
from csguard.core import (
    ChecksumParams, AlgorithmId, RunMode, Verdict, OutputFormat,
    ChecksumError, ConfigurationError, ChecksumFormatError, digest)

__all__ = [
    "ChecksumCommand",
    "ChecksumParams",
    "AlgorithmId",
    "RunMode",
    "Verdict",
    "OutputFormat",
    "ChecksumError",
    "ConfigurationError",
    "ChecksumFormatError",
    "digest",
    "__version__",
]
