"""Saving an inverted index to a data file and loading it back."""

from __future__ import annotations

import os
from typing import TextIO

from invertedsearch.index import NUM_BUCKETS, FileCount, InvertedIndex

Record = tuple[int, str, list[FileCount]]


class DataFileError(ValueError):
    """Raised when a file is not a well-formed database file."""


def is_txt_name(name: str) -> bool:
    """True when the first '.txt' in name is also its end."""
    position = name.find(".txt")
    return position >= 0 and name[position:] == ".txt"


def _require_txt(path: str | os.PathLike[str]) -> str:
    name = os.fspath(path)
    if not is_txt_name(os.path.basename(name)):
        raise ValueError(f"{name} -> This file is not a .txt file")
    return name


def dump_index(index: InvertedIndex, stream: TextIO) -> None:
    """Write one '#bucket;word;count;file;n;...#' record per entry."""
    for bucket, entry in index.entries():
        stream.write(f"#{bucket};{entry.word};{entry.file_count};")
        for counter in entry.files:
            stream.write(f"{counter.file_name};{counter.word_count};")
        stream.write("#\n")


def save_index(index: InvertedIndex, path: str | os.PathLike[str]) -> None:
    """Save the index to a .txt data file."""
    name = _require_txt(path)
    with open(name, "w", encoding="utf-8") as handle:
        dump_index(index, handle)


def _parse_line(line: str, lineno: int) -> Record:
    if len(line) < 2 or not (line.startswith("#") and line.endswith("#")):
        raise DataFileError(f"line {lineno}: record must start and end with '#'")
    fields = line[1:-1].split(";")
    if fields[-1] != "" or len(fields) < 4:
        raise DataFileError(f"line {lineno}: malformed record")
    fields.pop()
    try:
        bucket = int(fields[0])
        count = int(fields[2])
        pairs = fields[3:]
        files = [FileCount(name, int(n)) for name, n in zip(pairs[0::2], pairs[1::2])]
    except ValueError as exc:
        raise DataFileError(f"line {lineno}: bad number in record") from exc
    if not 0 <= bucket < NUM_BUCKETS:
        raise DataFileError(f"line {lineno}: bucket {bucket} is out of range")
    if count < 1 or len(pairs) != 2 * count:
        raise DataFileError(f"line {lineno}: file count does not match the record")
    return bucket, fields[1], files


def parse_records(text: str) -> list[Record]:
    """Parse the contents of a data file into (bucket, word, files) records."""
    if len(text) < 2 or text[0] != "#" or text[-2] != "#":
        raise DataFileError("This file is not a data file")
    return [
        _parse_line(line, lineno)
        for lineno, line in enumerate(text.splitlines(), 1)
        if line
    ]


def load_index(index: InvertedIndex, path: str | os.PathLike[str]) -> list[str]:
    """Add the records of a data file to index.

    Returns the file name closing each record, in first-seen order; these are
    the files whose contents the data file already accounts for.
    """
    name = _require_txt(path)
    with open(name, encoding="utf-8") as handle:
        records = parse_records(handle.read())
    closing: dict[str, None] = {}
    for bucket, word, files in records:
        index.add_entry(bucket, word, files)
        closing.setdefault(files[-1].file_name, None)
    return list(closing)