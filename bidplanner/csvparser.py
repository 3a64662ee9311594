"""A small CSV reader with a header row, row editing and write-back."""

from __future__ import annotations

import enum
from pathlib import Path
from typing import Callable, Iterator, Sequence, TypeVar, Union

T = TypeVar("T")


class CsvError(RuntimeError):
    """Raised for any problem reading or indexing CSV data."""

    def __init__(self, message: str) -> None:
        super().__init__(f"CSVparser : {message}")


class DataType(enum.Enum):
    """Whether the parser's data argument is a file path or the CSV text itself."""

    FILE = 0
    PURE = 1


class Row:
    """One data row, addressable by column position or header name."""

    def __init__(self, header: Sequence[str]) -> None:
        self._header = tuple(header)
        self._values: list[str] = []

    def __len__(self) -> int:
        return len(self._values)

    def __iter__(self) -> Iterator[str]:
        return iter(self._values)

    def push(self, value: str) -> None:
        """Append a value to the end of the row."""
        self._values.append(value)

    def set(self, key: str, value: str) -> bool:
        """Set the value under header ``key``; return False if there is no such column."""
        try:
            index = self._header.index(key)
        except ValueError:
            return False
        self._values[index] = value
        return True

    def get_value(self, pos: int, kind: Callable[[str], T] = str) -> T:
        """Read the first whitespace-delimited token at ``pos`` converted by ``kind``."""
        if not 0 <= pos < len(self._values):
            raise CsvError("can't return this value (doesn't exist)")
        tokens = self._values[pos].split()
        token = tokens[0] if tokens else ""
        if kind is str:
            return token  # type: ignore[return-value]
        try:
            return kind(token)
        except ValueError:
            return kind()  # type: ignore[call-arg]

    def __getitem__(self, key: Union[int, str]) -> str:
        if isinstance(key, str):
            try:
                index = self._header.index(key)
            except ValueError:
                raise CsvError("can't return this value (doesn't exist)") from None
            return self._values[index]
        if 0 <= key < len(self._values):
            return self._values[key]
        raise CsvError("can't return this value (doesn't exist)")

    def __str__(self) -> str:
        return "".join(f"{value} | " for value in self._values)

    def to_csv(self) -> str:
        """Render the row as a comma-separated line without a line ending."""
        return ",".join(self._values)


def _split_content_line(line: str) -> list[str]:
    """Split on commas that are outside double quotes, keeping the quotes."""
    fields: list[str] = []
    quoted = False
    start = 0
    for index, char in enumerate(line):
        if char == '"':
            quoted = not quoted
        elif char == "," and not quoted:
            fields.append(line[start:index])
            start = index + 1
    fields.append(line[start:])
    return fields


class Parser:
    """Parsed CSV data: a header line followed by rows of equal width."""

    def __init__(
        self,
        data: str,
        data_type: DataType = DataType.FILE,
        sep: str = ",",
    ) -> None:
        self._type = data_type
        self._sep = sep
        self._file = ""
        if data_type is DataType.FILE:
            self._file = data
            try:
                with open(data, encoding="utf-8", newline="") as handle:
                    text = handle.read()
            except OSError:
                raise CsvError(f"Failed to open {data}") from None
            lines = [line for line in text.split("\n") if line]
            if not lines:
                raise CsvError(f"No Data in {data}")
        else:
            lines = [line for line in data.split("\n") if line]
            if not lines:
                raise CsvError("No Data in pure content")

        self._header = self._parse_header(lines[0])
        self._content: list[Row] = []
        for line in lines[1:]:
            row = Row(self._header)
            for field in _split_content_line(line):
                row.push(field)
            if len(row) != len(self._header):
                raise CsvError("corrupted data !")
            self._content.append(row)

    def _parse_header(self, line: str) -> list[str]:
        items = line.split(self._sep)
        if len(items) > 1 and items[-1] == "":
            items.pop()
        return items

    def __getitem__(self, pos: int) -> Row:
        if 0 <= pos < len(self._content):
            return self._content[pos]
        raise CsvError("can't return this row (doesn't exist)")

    def __len__(self) -> int:
        return len(self._content)

    def __iter__(self) -> Iterator[Row]:
        return iter(self._content)

    def row_count(self) -> int:
        """Number of data rows (the header is not counted)."""
        return len(self._content)

    def column_count(self) -> int:
        """Number of header columns."""
        return len(self._header)

    def header(self) -> list[str]:
        """A copy of the header names."""
        return list(self._header)

    def header_element(self, pos: int) -> str:
        """The header name at ``pos``."""
        if not 0 <= pos < len(self._header):
            raise CsvError("can't return this header (doesn't exist)")
        return self._header[pos]

    def file_name(self) -> str:
        """The path the data was read from, or an empty string for pure content."""
        return self._file

    def delete_row(self, pos: int) -> bool:
        """Remove the row at ``pos``; return False if there is none."""
        if 0 <= pos < len(self._content):
            del self._content[pos]
            return True
        return False

    def add_row(self, pos: int, values: Sequence[str]) -> bool:
        """Insert a row built from ``values`` before ``pos``; return False if out of range."""
        if not 0 <= pos <= len(self._content):
            return False
        row = Row(self._header)
        for value in values:
            row.push(value)
        self._content.insert(pos, row)
        return True

    def sync(self) -> None:
        """Write the header and rows back to the source file (file data only)."""
        if self._type is not DataType.FILE:
            return
        lines = [",".join(self._header)]
        lines.extend(row.to_csv() for row in self._content)
        Path(self._file).write_text(
            "".join(f"{line}\n" for line in lines), encoding="utf-8", newline=""
        )