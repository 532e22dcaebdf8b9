from typing import Callable, Sequence

import polars as pl

from models.chunked import ChunkedByteReader
from models.csv_options import CsvOptions

Logger = Callable[[str], None]

_DTYPES: dict[str, pl.DataType] = {
    "str": pl.Utf8,
    "string": pl.Utf8,
    "object": pl.Utf8,
    "int": pl.Int64,
    "int64": pl.Int64,
    "int32": pl.Int32,
    "int16": pl.Int16,
    "int8": pl.Int8,
    "float": pl.Float64,
    "float64": pl.Float64,
    "float32": pl.Float32,
    "bool": pl.Boolean,
    "boolean": pl.Boolean,
    "datetime64": pl.Datetime("ms"),
    "datetime64[ns]": pl.Datetime("ns"),
}


def polars_schema(dtypes: dict[str, str]) -> dict[str, pl.DataType]:
    """Map pandas dtype strings to Polars data types.

    Matching is case-insensitive, so 'Int64' and 'int64' are the same.
    Columns with an unknown dtype are left out and Polars infers them.
    """
    schema = {}
    for column, dtype in dtypes.items():
        polars_type = _DTYPES.get(dtype.strip().lower())
        if polars_type is not None:
            schema[column] = polars_type
    return schema


def read_csv_chunks(
    chunks: Sequence[bytes],
    options: CsvOptions | None = None,
    infer_schema_length: int = 10_000,
    log: Logger | None = None,
) -> pl.DataFrame:
    """Parse a chunk list as one CSV document."""
    options = options or CsvOptions()
    schema_overrides = polars_schema(options.dtypes) if options.dtypes else None
    if log and schema_overrides:
        log(f"Applied schema overrides: {list(schema_overrides.keys())}")

    reader = ChunkedByteReader(chunks)
    try:
        df = pl.read_csv(
            reader,
            separator=options.delimiter,
            has_header=options.has_header,
            new_columns=options.columns,
            skip_rows=options.skip_rows,
            encoding=options.polars_encoding,
            ignore_errors=(options.encoding_errors == "ignore"),
            schema_overrides=schema_overrides,
            infer_schema_length=infer_schema_length,
        )
    except Exception as e:
        if log:
            log(f"Error during CSV processing: {str(e)}")
        raise RuntimeError(f"Error during CSV processing: {str(e)}") from e
    finally:
        reader.close()

    if log:
        log(f"✓ Parsed {df.height} rows x {df.width} columns")
    return df
