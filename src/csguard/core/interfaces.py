"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

interfaces.py

Defines core interfaces (Protocols) used throughout the checksum engine.
These protocols enforce structural typing using Python's `typing.Protocol` so that
hash backends, scanners and codecs can be swapped without touching the pipeline.

Key Components:
---------------
- HashAlgorithm: Standardized interface for hash functions (MD5, SHA-256, SHA-512).
- Hasher: Interface for computing the digest of a file on disk.
- FileScanner: Interface for enumerating the files of a target.
- ChecksumCodec: Interface for persisting and loading path -> digest mappings.
"""

from typing import Protocol, List, Mapping, Iterator

from csguard.core.models import ScannedFile, ChecksumSet


# ===== Interfaces =====

class IncrementalHash(Protocol):
    """Running hash state as returned by hashlib constructors."""
    def update(self, data: bytes) -> None: ...
    def hexdigest(self) -> str: ...


class HashAlgorithm(Protocol):
    """
    Interface for generic hash algorithms.

    Allows plugging in different hashing functions like SHA-256, MD5 or SHA-512
    without affecting the rest of the checksum logic.
    """

    def hash(self, data: bytes) -> str:
        """Computes the lowercase hex digest of the provided byte data."""
        ...

    def new(self) -> IncrementalHash:
        """Returns a fresh incremental hash object for streaming input."""
        ...


class Hasher(Protocol):
    """Interface for hashing a file on disk."""
    def compute_small(self, path: str) -> str: ...
    def compute_large(self, path: str) -> str: ...
    def compute(self, path: str, size: int) -> str: ...


class FileScanner(Protocol):
    """
    Interface for scanning a file or directory target.

    Methods:
        scan: Yields one ScannedFile per regular file.
    """
    def scan(self) -> Iterator[ScannedFile]:
        ...

    def scan_all(self) -> List[ScannedFile]:
        ...


class ChecksumCodec(Protocol):
    """
    Interface for one persisted checksum format (txt / json / yaml).
    """
    def dump(self, data: Mapping[str, str]) -> str:
        """Serialize a mapping into the format's text form."""
        ...

    def parse(self, text: str) -> ChecksumSet:
        """Rebuild a mapping from the format's text form."""
        ...
