import io

import pytest

from invertedsearch.index import FileCount, InvertedIndex
from invertedsearch.storage import (
    DataFileError,
    dump_index,
    is_txt_name,
    load_index,
    parse_records,
    save_index,
)


@pytest.mark.parametrize(
    "name, expected",
    [
        ("a.txt", True),
        (".txt", True),
        ("a.csv", False),
        ("a.txtx", False),
        ("a.txt.txt", False),
        ("txt", False),
    ],
)
def test_is_txt_name(name, expected):
    assert is_txt_name(name) is expected


def test_dump_index_record_format():
    index = InvertedIndex()
    index.add_entry(7, "hello", [FileCount("a.txt", 3), FileCount("b.txt", 1)])
    stream = io.StringIO()
    dump_index(index, stream)
    assert stream.getvalue() == "#7;hello;2;a.txt;3;b.txt;1;#\n"


def test_dump_empty_index_writes_nothing():
    stream = io.StringIO()
    dump_index(InvertedIndex(), stream)
    assert stream.getvalue() == ""


def test_parse_records_reads_fields():
    records = parse_records("#7;hello;2;a.txt;3;b.txt;1;#\n#0;apple;1;a.txt;4;#\n")
    assert records == [
        (7, "hello", [FileCount("a.txt", 3), FileCount("b.txt", 1)]),
        (0, "apple", [FileCount("a.txt", 4)]),
    ]


@pytest.mark.parametrize(
    "text",
    [
        "",
        "hello world\n",
        "#0;apple;1;a.txt;4;#",
        "#0;apple;2;a.txt;4;#\n",
        "#99;apple;1;a.txt;4;#\n",
        "#x;apple;1;a.txt;4;#\n",
        "#0;apple;1;a.txt;many;#\n",
        "#0;apple;0;#\n",
    ],
)
def test_parse_records_rejects_malformed(text):
    with pytest.raises(DataFileError):
        parse_records(text)


def test_round_trip_through_file(tmp_path):
    first = tmp_path / "a.txt"
    second = tmp_path / "b.txt"
    first.write_text("Alpha beta gamma beta 7up")
    second.write_text("beta delta alpha")
    original = InvertedIndex()
    original.build([str(first), str(second)])

    data = tmp_path / "db.txt"
    save_index(original, data)
    restored = InvertedIndex()
    load_index(restored, data)

    assert list(restored.entries()) == list(original.entries())
    assert restored.format_table() == original.format_table()


def test_load_keeps_stored_bucket(tmp_path):
    data = tmp_path / "db.txt"
    data.write_text("#3;apple;1;a.txt;1;#\n")
    index = InvertedIndex()
    load_index(index, data)
    assert [(b, e.word) for b, e in index.entries()] == [(3, "apple")]


def test_load_returns_closing_file_names(tmp_path):
    data = tmp_path / "db.txt"
    data.write_text(
        "#0;apple;2;a.txt;1;b.txt;2;#\n"
        "#1;bean;1;b.txt;1;#\n"
        "#2;corn;1;c.txt;5;#\n"
    )
    assert load_index(InvertedIndex(), data) == ["b.txt", "c.txt"]


def test_load_bad_file_leaves_index_unchanged(tmp_path):
    data = tmp_path / "db.txt"
    data.write_text("#0;apple;1;a.txt;1;#\nnot a record\n#1;bean;1;b.txt;1;#\n")
    index = InvertedIndex()
    with pytest.raises(DataFileError):
        load_index(index, data)
    assert len(index) == 0


def test_save_rejects_non_txt_name(tmp_path):
    with pytest.raises(ValueError):
        save_index(InvertedIndex(), tmp_path / "db.csv")
    assert not (tmp_path / "db.csv").exists()


def test_load_rejects_non_txt_name(tmp_path):
    data = tmp_path / "db.dat"
    data.write_text("#0;apple;1;a.txt;1;#\n")
    with pytest.raises(ValueError):
        load_index(InvertedIndex(), data)


def test_load_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_index(InvertedIndex(), tmp_path / "missing.txt")


def test_data_file_error_is_value_error():
    with pytest.raises(ValueError):
        parse_records("plain text\n")