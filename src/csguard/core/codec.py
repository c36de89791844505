"""
Copyright (c) 2025 initumX (initum.x@gmail.com)
Licensed under the MIT License

core/codec.py
Persists path -> value mappings as txt, json or yaml and loads them back.

FORMATS
-------
txt  : one "<path> <value>" line per entry, exactly two space-separated tokens
json : array of {"file_name": ..., "value": ...} records, "value" omitted when empty
yaml : same records as json
table: "<path> <value>" lines on stdout, write-only

The format is chosen by the last dot-separated token of the file name.
Saving always truncates the destination.
"""

import json
import logging
import sys
from typing import Dict, List, Mapping, Optional, TextIO

import yaml

from csguard.core.errors import ChecksumFormatError
from csguard.core.interfaces import ChecksumCodec
from csguard.core.models import ChecksumSet, OutputFormat

logger = logging.getLogger(__name__)

SUPPORTED_FORMATS_TEXT = "supported format 'txt', 'json', 'yaml'"


def _to_records(data: Mapping[str, object]) -> List[Dict[str, str]]:
    records = []
    for file_name, value in data.items():
        record = {"file_name": file_name}
        if value:
            record["value"] = str(value)
        records.append(record)
    return records


def _from_records(records, source: str) -> ChecksumSet:
    if records is None:
        return {}
    if not isinstance(records, list):
        raise ChecksumFormatError(f"{source}: expected a list of file_name/value records")

    result: ChecksumSet = {}
    for record in records:
        if not isinstance(record, dict) or "file_name" not in record:
            raise ChecksumFormatError(f"{source}: invalid record: {record!r}")
        value = record.get("value")
        result[str(record["file_name"])] = "" if value is None else str(value)
    return result


class TxtCodecImpl(ChecksumCodec):
    def dump(self, data: Mapping[str, object]) -> str:
        return "".join(f"{file_name} {value}\n" for file_name, value in data.items())

    def parse(self, text: str) -> ChecksumSet:
        result: ChecksumSet = {}
        lines = text.split("\n")
        if lines[-1] == "":
            # Trailing newline (or empty file) does not start a new line
            lines.pop()
        for line in lines:
            line = line.rstrip("\r")
            parts = line.split(" ")
            if len(parts) != 2:
                raise ChecksumFormatError(f"invalid line: {line}")
            result[parts[0]] = parts[1]
        return result


class JsonCodecImpl(ChecksumCodec):
    def dump(self, data: Mapping[str, object]) -> str:
        return json.dumps(_to_records(data))

    def parse(self, text: str) -> ChecksumSet:
        try:
            records = json.loads(text)
        except json.JSONDecodeError as e:
            raise ChecksumFormatError(f"invalid json: {e}") from e
        return _from_records(records, "json")


class YamlCodecImpl(ChecksumCodec):
    def dump(self, data: Mapping[str, object]) -> str:
        return yaml.safe_dump(_to_records(data), sort_keys=False, default_flow_style=False)

    def parse(self, text: str) -> ChecksumSet:
        try:
            records = yaml.safe_load(text)
        except yaml.YAMLError as e:
            raise ChecksumFormatError(f"invalid yaml: {e}") from e
        return _from_records(records, "yaml")


CODECS: Dict[OutputFormat, ChecksumCodec] = {
    OutputFormat.TXT: TxtCodecImpl(),
    OutputFormat.JSON: JsonCodecImpl(),
    OutputFormat.YAML: YamlCodecImpl(),
}


def detect_format(file_name: str, direction: str = "output") -> OutputFormat:
    """
    Maps the final extension token of file_name to a persisted format.

    Raises:
        ChecksumFormatError: If the extension is not txt, json or yaml
    """
    ext = file_name.split(".")[-1]
    for fmt in OutputFormat.persistent():
        if ext == fmt.value:
            return fmt
    raise ChecksumFormatError(f"invalid {direction} format. {SUPPORTED_FORMATS_TEXT}")


def save(data: Mapping[str, object], file_name: str) -> None:
    """Overwrites file_name with data in the format picked by its extension."""
    fmt = detect_format(file_name, "output")
    content = CODECS[fmt].dump(data)
    with open(file_name, "w", encoding="utf-8", newline="") as f:
        f.write(content)
    logger.debug(f"Wrote {len(data)} entries to {file_name} ({fmt.value})")


def load(file_name: str) -> ChecksumSet:
    """Reads a txt/json/yaml checksum file into a new mapping."""
    fmt = detect_format(file_name, "input")
    try:
        with open(file_name, "r", encoding="utf-8", newline="") as f:
            text = f.read()
    except UnicodeDecodeError as e:
        raise ChecksumFormatError(f"{file_name}: not valid utf-8: {e}") from e
    data = CODECS[fmt].parse(text)
    logger.debug(f"Loaded {len(data)} entries from {file_name} ({fmt.value})")
    return data


def render_table(data: Mapping[str, object], stream: Optional[TextIO] = None) -> None:
    """Prints "<path> <value>" per entry. Not a persistence format."""
    out = stream if stream is not None else sys.stdout
    for file_name, value in data.items():
        out.write(f"{file_name} {value}\n")
