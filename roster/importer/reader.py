"""Lazy row reader for uploaded CSV documents."""

import csv
from collections.abc import Iterator
from pathlib import Path
from typing import NamedTuple


class Row(NamedTuple):
    """One parsed CSV row and the line it ended on."""

    line: int
    values: list[str]


def read_rows(path: Path, encoding: str = "utf-8-sig") -> Iterator[Row]:
    """Yield the rows of a CSV document one at a time.

    The first row yielded is the header. Completely blank lines are
    skipped; a row of empty cells such as `,,,` is still yielded. The
    file stays open until the iterator is exhausted or closed, so wrap
    it in contextlib.closing when stopping early. Restarting means
    calling read_rows again.

    Raises:
        csv.Error: On malformed CSV (raised while iterating)
        UnicodeDecodeError: If the document is not valid UTF-8
    """
    with path.open(newline="", encoding=encoding) as f:
        reader = csv.reader(f, strict=True)
        for values in reader:
            if not values:
                continue
            yield Row(line=reader.line_num, values=values)
