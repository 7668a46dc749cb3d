"""Interactive menu for building, querying, saving and reloading an inverted index."""

from __future__ import annotations

import os
import sys
from collections.abc import Iterable, Iterator
from typing import TextIO

from invertedsearch.index import InvertedIndex
from invertedsearch.storage import DataFileError, is_txt_name, load_index, save_index

MENU = (
    "Select your option from given options:\n"
    "1.Create data base\n2.Display Data Base \n3.Search Data\n"
    "4.Save Data Base\n5.Update Data Base\n6.Exit\n"
    "Enter your choice: "
)

USAGE = (
    "INFO : Insufficient arguments\nplease give atleast two arguments\n\n"
    "arguments should be like invertedsearch <txt file> <txt file> <txt file>\n\n"
)


def validate_files(paths: Iterable[str | os.PathLike[str]], out: TextIO) -> list[str]:
    """Keep the paths that name existing, non-empty, distinct .txt files."""
    accepted: list[str] = []
    for path in paths:
        name = os.fspath(path)
        if not is_txt_name(name):
            out.write(f"INFO : {name} -> This file is not a .txt file \n\n")
            continue
        try:
            size = os.path.getsize(name)
            if not os.path.isfile(name):
                raise OSError(name)
        except OSError:
            out.write(f"INFO : {name}-> file is not present \n\n")
            continue
        if size == 0:
            out.write(f"INFO : {name} -> This file is empty \n\n")
        elif name in accepted:
            out.write(
                f"INFO : {name} -> This file is repeated, so it will not be stored\n\n"
            )
        else:
            accepted.append(name)
            out.write(f"INFO : Successful: inserting file name {name} into file list \n\n")
    return accepted


def format_file_list(files: Iterable[str]) -> str:
    """Render the file list as 'a -> b -> NULL', or a notice when it is empty."""
    files = list(files)
    if not files:
        return "INFO : Files are not there\nCreate database is not possible\n->NULL\n"
    return "".join(f"{name} -> " for name in files) + "NULL\n\n"


class Session:
    """State of one interactive run: the pending files and the index built so far."""

    def __init__(self, files: Iterable[str], out: TextIO) -> None:
        self.files = list(files)
        self.out = out
        self.index = InvertedIndex()
        self.created = False
        self.create_attempted = False
        self.updated = False

    def create(self) -> bool:
        """Index the pending files, once."""
        if self.created:
            self.out.write("INFO : Database is already created\n\n")
            return False
        self.create_attempted = True
        try:
            self.index.build(self.files)
        except ValueError:
            self.out.write(
                "INFO : No files are there to create the database from\n"
                "Creating the database is not possible\n->NULL\n\n"
            )
            return False
        except OSError as exc:
            self.out.write(f"Error : file not found: {exc.filename}\n\n")
            return False
        self.created = True
        self.out.write("INFO : Database is successfully created\n\n")
        return True

    def display(self) -> None:
        """Print the index as a table."""
        self.out.write(self.index.format_table() + "\n")

    def search(self, word: str) -> bool:
        """Print where a word occurs; False when it is not indexed."""
        entries = self.index.search(word) if word else []
        if not entries:
            self.out.write("INFO : Word is not found in the database\n\n")
            return False
        for entry in entries:
            self.out.write(f"\nWord {entry.word} is present in {entry.file_count} files\n")
            for counter in entry.files:
                self.out.write(
                    f"In file: {counter.file_name:<12s} {counter.word_count:<5d} times\n\n"
                )
        return True

    def save(self, name: str) -> bool:
        """Save the index to a .txt data file."""
        try:
            save_index(self.index, name)
        except ValueError as exc:
            self.out.write(f"INFO : {exc}\n\n")
            return False
        except OSError:
            self.out.write("file not opened \n\n")
            return False
        self.out.write("INFO : Database saved successfully\n\n")
        return True

    def update(self, name: str) -> bool:
        """Load a saved data file and drop the files it already covers."""
        if self.create_attempted:
            self.out.write("INFO : Database is already created, So update is not possible\n\n")
            return False
        if self.updated:
            self.out.write("INFO : Database is already updated\n\n\n")
            return False
        try:
            covered = load_index(self.index, name)
        except DataFileError:
            self.out.write(f"INFO : {name} -> This file is not a data file\n\n")
            return False
        except ValueError as exc:
            self.out.write(f"INFO : {exc}\n\n")
            return False
        except OSError:
            self.out.write("Error : file not found \n\n")
            return False
        self.files = [f for f in self.files if f not in covered]
        self.updated = True
        self.out.write("INFO : Database is updated successfully\n\n")
        self.out.write(format_file_list(self.files))
        self.out.write("\n")
        return True

    def run(self, lines: Iterable[str]) -> int:
        """Serve the menu, reading whitespace-separated answers from lines."""
        tokens: Iterator[str] = (token for line in lines for token in line.split())
        while True:
            self.out.write(MENU)
            choice = next(tokens, None)
            if choice is None:
                return 0
            if choice == "1":
                self.create()
            elif choice == "2":
                self.display()
            elif choice == "3":
                self.out.write("Please enter the word to search in database: ")
                self.search(next(tokens, ""))
            elif choice == "4":
                self.out.write("Enter the file name to save database: ")
                self.save(next(tokens, ""))
            elif choice == "5":
                self.out.write("Please enter the file name : ")
                self.update(next(tokens, ""))
            elif choice == "6":
                return 0
            else:
                self.out.write("Invalid Input:-->>> please Try again...\n")


def main(argv: list[str] | None = None) -> int:
    """Validate the files named on the command line and start the menu."""
    args = sys.argv[1:] if argv is None else list(argv)
    out = sys.stdout
    if not args:
        out.write(USAGE)
        return 0
    files = validate_files(args, out)
    out.write(format_file_list(files))
    return Session(files, out).run(sys.stdin)


if __name__ == "__main__":
    raise SystemExit(main())