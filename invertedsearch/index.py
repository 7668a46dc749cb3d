"""In-memory inverted index mapping words to per-file occurrence counts."""

from __future__ import annotations

import os
from collections.abc import Iterable, Iterator
from dataclasses import dataclass, field

LETTER_BUCKETS = 26
OTHER_BUCKET = LETTER_BUCKETS
NUM_BUCKETS = LETTER_BUCKETS + 1

TABLE_HEADER = "Index     Word            Filecount    Filename     Wordcount\n\n"


def bucket_index(word: str) -> int:
    """Return the bucket of a word: its first letter, case-folded, or the catch-all bucket."""
    if not word:
        raise ValueError("cannot index an empty word")
    first = word[0]
    if "A" <= first <= "Z":
        return ord(first) - ord("A")
    if "a" <= first <= "z":
        return ord(first) - ord("a")
    return OTHER_BUCKET


@dataclass
class FileCount:
    """How many times a word occurs in one file."""

    file_name: str
    word_count: int = 1


@dataclass
class WordEntry:
    """A word together with the files it occurs in, in order of discovery."""

    word: str
    files: list[FileCount] = field(default_factory=list)

    @property
    def file_count(self) -> int:
        """Number of files the word occurs in."""
        return len(self.files)


class InvertedIndex:
    """Words grouped into buckets by their first letter, each with per-file counts."""

    def __init__(self) -> None:
        self._buckets: list[list[WordEntry]] = [[] for _ in range(NUM_BUCKETS)]

    def __len__(self) -> int:
        return sum(len(bucket) for bucket in self._buckets)

    def add_word(self, word: str, file_name: str) -> WordEntry:
        """Record one occurrence of word in file_name."""
        bucket = self._buckets[bucket_index(word)]
        entry = next((e for e in bucket if e.word == word), None)
        if entry is None:
            entry = WordEntry(word, [FileCount(file_name, 1)])
            bucket.append(entry)
            return entry
        counter = next((f for f in entry.files if f.file_name == file_name), None)
        if counter is None:
            entry.files.append(FileCount(file_name, 1))
        else:
            counter.word_count += 1
        return entry

    def add_entry(self, bucket: int, word: str, files: Iterable[FileCount]) -> WordEntry:
        """Append a ready-made entry to the given bucket without merging."""
        if not 0 <= bucket < NUM_BUCKETS:
            raise ValueError(f"bucket {bucket} is out of range")
        entry = WordEntry(word, [FileCount(f.file_name, f.word_count) for f in files])
        self._buckets[bucket].append(entry)
        return entry

    def add_file(self, path: str | os.PathLike[str]) -> None:
        """Index every whitespace-separated word of a text file."""
        file_name = os.fspath(path)
        with open(file_name, encoding="utf-8", errors="replace") as handle:
            for line in handle:
                for word in line.split():
                    self.add_word(word, file_name)

    def build(self, paths: Iterable[str | os.PathLike[str]]) -> None:
        """Index each file in turn."""
        paths = list(paths)
        if not paths:
            raise ValueError("no files to create the database from")
        for path in paths:
            self.add_file(path)

    def search(self, word: str) -> list[WordEntry]:
        """Return every entry for exactly this word (case-sensitive)."""
        bucket = self._buckets[bucket_index(word)]
        return [entry for entry in bucket if entry.word == word]

    def entries(self) -> Iterator[tuple[int, WordEntry]]:
        """Yield (bucket, entry) pairs, by bucket, then in insertion order."""
        for number, bucket in enumerate(self._buckets):
            for entry in bucket:
                yield number, entry

    def format_table(self) -> str:
        """Render the index as a fixed-width table."""
        lines = [TABLE_HEADER]
        for number, entry in self.entries():
            row = f"{number:<10d}{entry.word:<15s} {entry.file_count:<13d}"
            row += "".join(f"{f.file_name:<12s} {f.word_count:<10d} " for f in entry.files)
            lines.append(row + "\n")
        return "".join(lines)