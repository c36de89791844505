"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/models.py
Data models for checksum calculation and validation.
"""

from dataclasses import dataclass
from enum import Enum
from pathlib import Path
from typing import Dict, Optional
import os

from csguard.core.errors import ConfigurationError


# =============================
# Enums
# =============================

class AlgorithmId(Enum):
    """
    Digest algorithm used for the whole run.
    """
    MD5 = "md5"
    SHA256 = "sha256"
    SHA512 = "sha512"

    @property
    def display_name(self) -> str:
        """Human-readable name for help text and logs."""
        mapping = {
            AlgorithmId.MD5: "MD5",
            AlgorithmId.SHA256: "SHA-256",
            AlgorithmId.SHA512: "SHA-512",
        }
        return mapping.get(self, self.value)

    @property
    def hex_length(self) -> int:
        """Length of the hexadecimal digest produced by this algorithm."""
        mapping = {
            AlgorithmId.MD5: 32,
            AlgorithmId.SHA256: 64,
            AlgorithmId.SHA512: 128,
        }
        return mapping[self]

    @classmethod
    def parse(cls, value: Optional[str]) -> "AlgorithmId":
        """
        Parse an algorithm identifier such as "sha256".
        None or an empty string selects MD5; anything unrecognized is an error.
        """
        if not value:
            return cls.MD5
        try:
            return cls(value.strip().lower())
        except ValueError:
            supported = ", ".join(a.value for a in cls)
            raise ConfigurationError(
                f"invalid algorithm '{value}'. supported algorithms: {supported}"
            ) from None

    def __repr__(self) -> str:
        return self.value


class Verdict(str, Enum):
    OK = "OK"
    NOT_OK = "NOT OK"
    MISSING = "missing"

    def __str__(self) -> str:
        return self.value


class OutputFormat(Enum):
    TXT = "txt"
    JSON = "json"
    YAML = "yaml"
    TABLE = "table"

    @classmethod
    def persistent(cls):
        return [cls.TXT, cls.JSON, cls.YAML]


class RunMode(Enum):
    CALCULATE = "calculate"
    VALIDATE = "validate"


# Path -> digest / path -> verdict. Created fresh for every call.
ChecksumSet = Dict[str, str]
VerdictSet = Dict[str, Verdict]


# ======================
#  Core Data Models
# ======================

@dataclass(frozen=True)
class ScannedFile:
    """
    A regular file found by traversal.
    """
    path: str
    size: int  # in bytes

    def __repr__(self):
        return f"<ScannedFile path={self.path}, size={self.size}>"


"""
DTO for checksum run parameters with built-in validation.
Interface-agnostic - built once from CLI flags, never changed during a run.
"""

@dataclass(frozen=True)
class ChecksumParams:
    """Parameters for a calculate or validate run."""
    mode: RunMode
    input_file: str = ""
    input_folder: str = ""
    checksum: str = ""
    checksum_file: str = ""
    output: str = ""
    algorithm: AlgorithmId = AlgorithmId.MD5

    def __post_init__(self):
        """Validate parameters immediately after creation."""
        if self.mode == RunMode.CALCULATE:
            if not self.input_file and not self.input_folder:
                raise ConfigurationError("either --input-file or --input-folder must be set")
            if self.input_file and self.input_folder:
                raise ConfigurationError("--input-file and --input-folder are mutually exclusive")
        else:
            if self.input_folder:
                raise ConfigurationError("--input-folder is not supported by validate")
            if not self.input_file and not self.checksum_file:
                raise ConfigurationError("either --input-file or --checksum-file must be set")
            if self.input_file and not self.checksum:
                raise ConfigurationError("--checksum is empty")

    @property
    def output_is_table(self) -> bool:
        return not self.output or self.output == OutputFormat.TABLE.value

    def check_paths(self) -> None:
        """
        Check that configured inputs exist and have the right kind.
        Called before any computation starts.
        """
        if self.input_file:
            self._check_exists(self.input_file, "input file")
            if os.path.isdir(self.input_file):
                hint = ". use --input-folder for directory" if self.mode == RunMode.CALCULATE else ""
                raise ConfigurationError(f"--input-file must be a file, not a directory{hint}")

        if self.input_folder:
            self._check_exists(self.input_folder, "input folder")
            if not os.path.isdir(self.input_folder):
                raise ConfigurationError(
                    "--input-folder must be a folder, not a file. use --input-file for single file"
                )

        if self.checksum_file:
            self._check_exists(self.checksum_file, "checksum-file")
            if os.path.isdir(self.checksum_file):
                raise ConfigurationError("--checksum-file must be a file, not a directory")

    @staticmethod
    def _check_exists(path: str, label: str) -> None:
        try:
            Path(path).stat()
        except OSError as e:
            raise ConfigurationError(f"error checking {label}: {e}") from e
