"""Reading the year / internet percentage / population table from CSV."""

from __future__ import annotations

import csv
import os
from dataclasses import dataclass
from typing import Sequence, Union

Number = Union[int, float]


@dataclass(frozen=True)
class Record:
    """One row of the table: a year, the internet share and the population."""

    year: int
    percentage: float
    population: Number


def _number(text: str) -> Number:
    text = text.strip()
    try:
        return int(text)
    except ValueError:
        return float(text)


def _parse_row(row: Sequence[str]) -> Record | None:
    if len(row) < 3:
        return None
    try:
        return Record(int(row[0].strip()), float(row[1]), _number(row[2]))
    except ValueError:
        return None


def read_records(
    path: str | os.PathLike[str], limit: int | None = None
) -> list[Record]:
    """Read the records after the header line, skipping malformed rows.

    At most ``limit`` records are returned when a limit is given.
    """
    records: list[Record] = []
    with open(path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        next(reader, None)
        for row in reader:
            if limit is not None and len(records) >= limit:
                break
            record = _parse_row(row)
            if record is not None:
                records.append(record)
    return records