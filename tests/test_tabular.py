import polars as pl
import pytest

from models.csv_options import CsvOptions
from services.tabular import polars_schema, read_csv_chunks


def test_polars_schema_maps_known_dtypes_case_insensitively() -> None:
    schema = polars_schema({"a": "Int64", "b": "float32", "c": "str", "d": "weird"})

    assert schema == {"a": pl.Int64, "b": pl.Float32, "c": pl.Utf8}


def test_read_csv_chunks_split_mid_row() -> None:
    chunks = [b"name,qty\nap", b"", b"ple,3\nbanana,", b"5\n"]

    df = read_csv_chunks(chunks)

    assert df.columns == ["name", "qty"]
    assert df["name"].to_list() == ["apple", "banana"]
    assert df["qty"].to_list() == [3, 5]


def test_read_csv_chunks_applies_options() -> None:
    chunks = [b"junk line\n", b"x;1\ny;2\n"]
    options = CsvOptions(delimiter=";", skip_rows=1, columns=["key", "value"])
    messages = []

    df = read_csv_chunks(chunks, options, log=messages.append)

    assert df.columns == ["key", "value"]
    assert df["key"].to_list() == ["x", "y"]
    assert messages


def test_read_csv_chunks_schema_overrides() -> None:
    df = read_csv_chunks(
        [b"id,score\n1,2\n", b"3,4\n"],
        CsvOptions(dtypes={"score": "float64"}),
    )

    assert df.schema["score"] == pl.Float64


def test_read_csv_chunks_wraps_parse_errors() -> None:
    options = CsvOptions(dtypes={"n": "int64"})

    with pytest.raises(RuntimeError, match="Error during CSV processing"):
        read_csv_chunks([b"n\n1\nnot-a-number\n"], options)


def test_csv_options_header_follows_columns() -> None:
    assert CsvOptions().has_header
    assert not CsvOptions(columns=["a"]).has_header


def test_csv_options_polars_encoding() -> None:
    assert CsvOptions().polars_encoding == "utf8"
    assert CsvOptions(encoding="UTF_8", encoding_errors="replace").polars_encoding == "utf8-lossy"
    assert CsvOptions(encoding="latin-1", encoding_errors="replace").polars_encoding == "latin-1"


def test_read_csv_chunks_replaces_invalid_utf8() -> None:
    df = read_csv_chunks(
        [b"word\n", b"\xffok\n"],
        CsvOptions(encoding_errors="replace"),
    )

    assert df["word"].to_list() == ["�ok"]
