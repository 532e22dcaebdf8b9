from typing import Literal

from pydantic import BaseModel, Field


class CsvOptions(BaseModel):
    """Parsing options for CSV data read out of a chunk list.

    Attributes:
        delimiter: Field separator (default: ",")
        encoding: Text encoding of the bytes (default: "utf-8")
        skip_rows: Number of leading rows to drop before parsing
        columns: Column names to apply; when set the data has no header row
        dtypes: Column type rules (column name -> pandas dtype string)
        encoding_errors: "strict" fails on bad data, "ignore" skips rows that
            do not parse, "replace" swaps invalid UTF-8 for U+FFFD
    """

    delimiter: str = Field(",", min_length=1, max_length=1, description="CSV separator")
    encoding: str = Field("utf-8", description="Text encoding (e.g., utf-8, latin-1)")
    skip_rows: int = Field(0, ge=0, description="Number of rows to skip")
    columns: list[str] | None = Field(None, description="Column names to apply")
    dtypes: dict[str, str] | None = Field(
        None, description="Column type rules (pandas dtypes)"
    )
    encoding_errors: Literal["strict", "ignore", "replace"] = Field(
        "strict", description="Error handling for malformed data"
    )

    @property
    def has_header(self) -> bool:
        return self.columns is None

    @property
    def polars_encoding(self) -> str:
        """Encoding name as Polars expects it."""
        if self.encoding.replace("-", "").replace("_", "").lower() == "utf8":
            return "utf8-lossy" if self.encoding_errors == "replace" else "utf8"
        return self.encoding
