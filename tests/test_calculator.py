"""
Unit tests for ChecksumCalculatorImpl.
"""
import hashlib
from unittest import mock

import pytest

from csguard.core.calculator import ChecksumCalculatorImpl
from csguard.core.hasher import HasherImpl
from csguard.core.models import AlgorithmId, ScannedFile
from csguard.core.scanner import FileScannerImpl
from conftest import HELLO_MD5


class TestChecksumCalculatorImpl:

    def test_single_file(self, test_files):
        calculator = ChecksumCalculatorImpl(HasherImpl(AlgorithmId.MD5))
        result = calculator.calculate(FileScannerImpl(str(test_files["hello"])).scan())
        assert result == {str(test_files["hello"]): HELLO_MD5}

    def test_folder_mapping(self, test_files):
        calculator = ChecksumCalculatorImpl(HasherImpl(AlgorithmId.SHA256))
        result = calculator.calculate(FileScannerImpl(str(test_files["root"]), recursive=True).scan())

        assert len(result) == 4
        assert result[str(test_files["empty"])] == hashlib.sha256(b"").hexdigest()
        assert result[str(test_files["deep"])] == hashlib.sha256(b"x").hexdigest()

    def test_idempotent(self, test_files):
        calculator = ChecksumCalculatorImpl(HasherImpl(AlgorithmId.SHA512))
        scanner = FileScannerImpl(str(test_files["root"]), recursive=True)
        assert calculator.calculate(scanner.scan()) == calculator.calculate(scanner.scan())

    def test_each_call_returns_new_mapping(self, test_files):
        calculator = ChecksumCalculatorImpl(HasherImpl())
        first = calculator.calculate(FileScannerImpl(str(test_files["hello"])).scan())
        first["injected"] = "value"
        second = calculator.calculate(FileScannerImpl(str(test_files["hello"])).scan())
        assert "injected" not in second

    def test_duplicate_path_keeps_last(self, test_files):
        path = str(test_files["hello"])
        calculator = ChecksumCalculatorImpl(HasherImpl())
        result = calculator.calculate([ScannedFile(path, 5), ScannedFile(path, 5)])
        assert result == {path: HELLO_MD5}

    def test_vanished_file_aborts(self, test_files):
        calculator = ChecksumCalculatorImpl(HasherImpl())
        files = [
            ScannedFile(str(test_files["hello"]), 5),
            ScannedFile(str(test_files["root"] / "vanished.txt"), 3),
        ]
        with pytest.raises(FileNotFoundError):
            calculator.calculate(files)

    def test_compute_file_stats_and_hashes(self, test_files):
        calculator = ChecksumCalculatorImpl(HasherImpl())
        assert calculator.compute_file(str(test_files["hello"])) == HELLO_MD5

    def test_compute_file_uses_given_size(self, test_files):
        calculator = ChecksumCalculatorImpl(HasherImpl())
        with mock.patch.object(calculator.hasher, "compute", return_value="x") as compute:
            assert calculator.compute_file(str(test_files["hello"]), 5) == "x"
        compute.assert_called_once_with(str(test_files["hello"]), 5)

    def test_algorithm_follows_hasher(self):
        assert ChecksumCalculatorImpl(HasherImpl(AlgorithmId.SHA256)).algorithm == AlgorithmId.SHA256
