"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

hasher.py
Implements file hashing with pluggable hash algorithms.

Files up to LARGE_FILE_SIZE_THRESHOLD are read into memory and hashed in one step;
larger files are streamed in CHUNK_SIZE pieces so memory stays bounded.
Both paths produce the same hex digest for the same content.
"""

import hashlib
import logging
from typing import BinaryIO, Dict, Union

from csguard.core.interfaces import Hasher, HashAlgorithm, IncrementalHash
from csguard.core.models import AlgorithmId
from csguard.utils.convert_utils import ConvertUtils

logger = logging.getLogger(__name__)

LARGE_FILE_SIZE_THRESHOLD = 100 * 1024 * 1024  # 100 MiB, inclusive to the in-memory path
CHUNK_SIZE = 1024 * 1024


# Use the same way to implement and use any other hashing algorithm
class HashlibAlgorithmImpl(HashAlgorithm):
    def __init__(self, name: str):
        self.name = name

    def hash(self, data: bytes) -> str:
        return hashlib.new(self.name, data).hexdigest()

    def new(self) -> IncrementalHash:
        return hashlib.new(self.name)


ALGORITHMS: Dict[AlgorithmId, HashAlgorithm] = {
    AlgorithmId.MD5: HashlibAlgorithmImpl("md5"),
    AlgorithmId.SHA256: HashlibAlgorithmImpl("sha256"),
    AlgorithmId.SHA512: HashlibAlgorithmImpl("sha512"),
}


def get_algorithm(algorithm: AlgorithmId) -> HashAlgorithm:
    return ALGORITHMS[algorithm]


def digest(algorithm: AlgorithmId, source: Union[bytes, bytearray, memoryview, BinaryIO]) -> str:
    """
    Computes the hex digest of an in-memory buffer or of a binary stream read to EOF.

    Args:
        algorithm: Digest algorithm
        source: Bytes-like object (small-file path) or readable binary stream (large-file path)

    Returns:
        str: Lowercase hexadecimal digest
    """
    impl = get_algorithm(algorithm)
    if isinstance(source, (bytes, bytearray, memoryview)):
        return impl.hash(bytes(source))

    running = impl.new()
    for chunk in iter(lambda: source.read(CHUNK_SIZE), b""):
        running.update(chunk)
    return running.hexdigest()


def is_large_file(size: int) -> bool:
    """True if a file of this size must be streamed instead of read into memory."""
    return size > LARGE_FILE_SIZE_THRESHOLD


class HasherImpl(Hasher):
    """
    Computes file digests with a single algorithm fixed at construction.
    """

    def __init__(self, algorithm: AlgorithmId = AlgorithmId.MD5):
        self.algorithm = algorithm

    def compute_small(self, path: str) -> str:
        """Reads the whole file and hashes it in one step."""
        with open(path, "rb") as f:
            data = f.read()
        return digest(self.algorithm, data)

    def compute_large(self, path: str) -> str:
        """Streams the file through the hash to EOF."""
        f = open(path, "rb")
        try:
            return digest(self.algorithm, f)
        finally:
            try:
                f.close()
            except OSError as e:
                logger.warning(f"Failed to close {path}: {e}")

    def compute(self, path: str, size: int) -> str:
        """Picks the in-memory or streaming path based on file size."""
        if is_large_file(size):
            logger.debug(f"Streaming {path} ({ConvertUtils.bytes_to_human(size)})")
            return self.compute_large(path)
        logger.debug(f"Hashing {path} in memory ({ConvertUtils.bytes_to_human(size)})")
        return self.compute_small(path)
