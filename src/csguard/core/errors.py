"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/errors.py
Exception types raised by the checksum engine.
I/O failures are not wrapped: they propagate as the built-in OSError subclasses.
"""


class ChecksumError(Exception):
    """Base class for all engine errors."""


class ConfigurationError(ChecksumError, ValueError):
    """Missing, contradictory or unknown input detected before any computation."""


class ChecksumFormatError(ChecksumError, ValueError):
    """Unsupported file extension or malformed persisted checksum data."""
