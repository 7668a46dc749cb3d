# invertedsearch

An interactive tool for building an inverted index over plain `.txt` files.
For every word it records which files contain it and how many times it
appears in each. The index can be listed, searched, saved to a data file and
loaded again later.

## Installation

```
pip install .
```

## Command-line use

Pass one or more `.txt` files:

```
invertedsearch notes.txt report.txt diary.txt
```

With no arguments the command prints a usage note and exits.

Each file is checked first. A file whose name does not end in `.txt`, that
does not exist, that is empty, or that is named a second time is reported and
skipped. The files that remain are listed as `a.txt -> b.txt -> NULL`, and then
a menu is shown:

```
1.Create data base
2.Display Data Base
3.Search Data
4.Save Data Base
5.Update Data Base
6.Exit
```

Answers are read from standard input as whitespace-separated tokens. The
menu closes on `6` or at the end of input.

- **Create data base** reads every accepted file and indexes its
  whitespace-separated words. Words go into 26 buckets by first letter, with
  case ignored. Words that start with anything else share a 27th bucket
  (number 26). Words themselves are kept as written, so `Hello` and `hello`
  are different words. The database can be created only once.
- **Display Data Base** prints a table with one row per word: the bucket, the
  word, how many files contain it, and each file with its count.
- **Search Data** asks for a word and reports every file that contains it
  and how many times. The match is exact and case-sensitive.
- **Save Data Base** asks for a file name that must end in `.txt`, and
  writes the index to it as one record per line:
  `#bucket;word;filecount;file;count;...;#`.
- **Update Data Base** asks for a saved data file and adds its records to the
  index. Files that already close a loaded record are dropped from the list
  of files still to index, and the new list is printed. Updating is possible
  only once, and only before a create has been tried.
- **Exit** quits.

## Library use

```python
from invertedsearch.index import InvertedIndex, bucket_index
from invertedsearch.storage import save_index, load_index, parse_records

index = InvertedIndex()
index.build(["notes.txt", "report.txt"])   # ValueError if the list is empty

for entry in index.search("hello"):        # list of WordEntry, possibly empty
    print(entry.word, entry.file_count)
    for fc in entry.files:
        print(fc.file_name, fc.word_count)

print(len(index))                          # number of distinct words
print(index.format_table())

save_index(index, "data.txt")

restored = InvertedIndex()
covered = load_index(restored, "data.txt")  # file names the data file accounts for
```

Other parts of the API:

- `InvertedIndex.add_word(word, file_name)` records one occurrence;
  `InvertedIndex.add_file(path)` indexes one file.
- `InvertedIndex.add_entry(bucket, word, files)` appends a ready-made entry
  without merging it with existing ones.
- `InvertedIndex.entries()` yields `(bucket, WordEntry)` pairs in bucket
  order, then in insertion order.
- `bucket_index(word)` gives the bucket a word belongs to.
- `storage.dump_index(index, stream)` writes records to an open text stream.
- `storage.parse_records(text)` parses the text of a data file into
  `(bucket, word, files)` records without touching an index.
- `storage.is_txt_name(name)` tells whether a name ends in `.txt`.
- `storage.DataFileError`, a `ValueError`, is raised when a file is not a
  well-formed data file. `save_index` and `load_index` raise `ValueError`
  for names that do not end in `.txt`.
- `cli.Session` holds the state of one menu run and can be driven directly
  with `Session(files, out).run(lines)`.