"""
Tests for txt / json / yaml persistence and table rendering.
"""
import io
import json

import pytest
import yaml

from csguard.core import codec
from csguard.core.errors import ChecksumFormatError
from csguard.core.models import OutputFormat, Verdict

SAMPLE = {
    "root/a.txt": "5d41402abc4b2a76b9719d911017c592",
    "root/sub/b.bin": "d41d8cd98f00b204e9800998ecf8427e",
    # all digits: must survive yaml as a string
    "root/c.txt": "12345678901234567890123456789012",
}


class TestDetectFormat:

    @pytest.mark.parametrize("name, expected", [
        ("sums.txt", OutputFormat.TXT),
        ("sums.json", OutputFormat.JSON),
        ("sums.yaml", OutputFormat.YAML),
        ("archive.tar.json", OutputFormat.JSON),
        ("dir.v1/sums.txt", OutputFormat.TXT),
    ])
    def test_supported_extensions(self, name, expected):
        assert codec.detect_format(name) == expected

    @pytest.mark.parametrize("name", ["sums.yml", "sums.csv", "sums", "sums.TXT", "sums."])
    def test_unsupported_extensions(self, name):
        with pytest.raises(ChecksumFormatError, match="invalid output format"):
            codec.detect_format(name)

    def test_input_direction_in_message(self):
        with pytest.raises(ChecksumFormatError, match="invalid input format"):
            codec.detect_format("sums.csv", "input")


class TestSaveLoad:

    @pytest.mark.parametrize("ext", ["txt", "json", "yaml"])
    def test_saved_mapping_loads_back(self, tmp_path, ext):
        path = str(tmp_path / f"sums.{ext}")
        codec.save(SAMPLE, path)
        assert codec.load(path) == SAMPLE

    def test_txt_layout(self, tmp_path):
        path = tmp_path / "sums.txt"
        codec.save({"a.txt": "abc"}, str(path))
        assert path.read_text(encoding="utf-8") == "a.txt abc\n"

    def test_json_layout(self, tmp_path):
        path = tmp_path / "sums.json"
        codec.save({"a.txt": "abc", "b.txt": ""}, str(path))
        assert json.loads(path.read_text()) == [
            {"file_name": "a.txt", "value": "abc"},
            {"file_name": "b.txt"},
        ]

    def test_yaml_layout(self, tmp_path):
        path = tmp_path / "sums.yaml"
        codec.save({"a.txt": "abc"}, str(path))
        assert yaml.safe_load(path.read_text()) == [{"file_name": "a.txt", "value": "abc"}]
        assert path.read_text().startswith("- file_name: a.txt")

    def test_save_truncates(self, tmp_path):
        path = str(tmp_path / "sums.txt")
        codec.save(SAMPLE, path)
        codec.save({"only.txt": "1"}, path)
        assert codec.load(path) == {"only.txt": "1"}

    def test_verdicts_are_written_as_text(self, tmp_path):
        verdicts = {"a.txt": Verdict.OK, "b.txt": Verdict.NOT_OK, "c.txt": Verdict.MISSING}
        txt = tmp_path / "v.txt"
        codec.save(verdicts, str(txt))
        assert txt.read_text() == "a.txt OK\nb.txt NOT OK\nc.txt missing\n"

        yml = str(tmp_path / "v.yaml")
        codec.save(verdicts, yml)
        assert codec.load(yml) == {"a.txt": "OK", "b.txt": "NOT OK", "c.txt": "missing"}

    def test_empty_mapping(self, tmp_path):
        for ext in ("txt", "json", "yaml"):
            path = str(tmp_path / f"empty.{ext}")
            codec.save({}, path)
            assert codec.load(path) == {}

    def test_unsupported_save_writes_nothing(self, tmp_path):
        path = tmp_path / "sums.csv"
        with pytest.raises(ChecksumFormatError):
            codec.save(SAMPLE, str(path))
        assert not path.exists()

    def test_load_missing_file_raises_os_error(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            codec.load(str(tmp_path / "nope.txt"))


class TestTxtParsing:

    def test_single_token_line_is_invalid(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("onlyonetoken\n")
        with pytest.raises(ChecksumFormatError, match="invalid line: onlyonetoken"):
            codec.load(str(path))

    def test_three_token_line_is_invalid(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("a.txt abc extra\n")
        with pytest.raises(ChecksumFormatError, match="invalid line"):
            codec.load(str(path))

    def test_double_space_is_invalid(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("a.txt  abc\n")
        with pytest.raises(ChecksumFormatError, match="invalid line"):
            codec.load(str(path))

    def test_blank_line_is_invalid(self, tmp_path):
        path = tmp_path / "bad.txt"
        path.write_text("a.txt abc\n\nb.txt def\n")
        with pytest.raises(ChecksumFormatError, match="invalid line"):
            codec.load(str(path))

    def test_non_utf8_file_is_a_format_error(self, tmp_path):
        path = tmp_path / "sums.txt"
        path.write_bytes(b"\xff\xfea.txt abc\n")
        with pytest.raises(ChecksumFormatError, match="not valid utf-8"):
            codec.load(str(path))

    def test_missing_final_newline_and_crlf(self, tmp_path):
        path = tmp_path / "sums.txt"
        path.write_bytes(b"a.txt abc\r\nb.txt def")
        assert codec.load(str(path)) == {"a.txt": "abc", "b.txt": "def"}

    def test_later_line_wins(self, tmp_path):
        path = tmp_path / "sums.txt"
        path.write_text("a.txt first\na.txt second\n")
        assert codec.load(str(path)) == {"a.txt": "second"}


class TestStructuredParsing:

    def test_json_later_record_wins(self, tmp_path):
        path = tmp_path / "sums.json"
        path.write_text('[{"file_name": "a", "value": "1"}, {"file_name": "a", "value": "2"}]')
        assert codec.load(str(path)) == {"a": "2"}

    def test_json_missing_value_is_empty(self, tmp_path):
        path = tmp_path / "sums.json"
        path.write_text('[{"file_name": "a"}]')
        assert codec.load(str(path)) == {"a": ""}

    def test_json_null_document_is_empty(self, tmp_path):
        path = tmp_path / "sums.json"
        path.write_text("null")
        assert codec.load(str(path)) == {}

    def test_invalid_json(self, tmp_path):
        path = tmp_path / "sums.json"
        path.write_text("[{")
        with pytest.raises(ChecksumFormatError, match="invalid json"):
            codec.load(str(path))

    def test_json_object_instead_of_list(self, tmp_path):
        path = tmp_path / "sums.json"
        path.write_text('{"a": "1"}')
        with pytest.raises(ChecksumFormatError):
            codec.load(str(path))

    def test_record_without_file_name(self, tmp_path):
        path = tmp_path / "sums.yaml"
        path.write_text("- value: abc\n")
        with pytest.raises(ChecksumFormatError, match="invalid record"):
            codec.load(str(path))

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / "sums.yaml"
        path.write_text("- file_name: [unclosed\n")
        with pytest.raises(ChecksumFormatError, match="invalid yaml"):
            codec.load(str(path))


class TestRenderTable:

    def test_lines_per_entry(self):
        out = io.StringIO()
        codec.render_table({"a.txt": "abc", "b.txt": Verdict.NOT_OK}, out)
        assert out.getvalue() == "a.txt abc\nb.txt NOT OK\n"

    def test_defaults_to_stdout(self, capsys):
        codec.render_table({"a.txt": "abc"})
        assert capsys.readouterr().out == "a.txt abc\n"
