"""Least-squares polynomial fitting on raw years via the normal equations."""

from __future__ import annotations

import argparse
import sys
from typing import Iterable, Sequence

from popforecast.csvdata import read_records

DEFAULT_DATA = "Data Tugas Pemrograman A.csv"
DEGREE = 3
MAX_RECORDS = 1000


def gauss_jordan(matrix: Sequence[Sequence[float]]) -> list[float]:
    """Solve an m x (m+1) augmented system with partial pivoting.

    Raises ValueError for a malformed or singular system.
    """
    rows = [[float(v) for v in row] for row in matrix]
    m = len(rows)
    if any(len(row) != m + 1 for row in rows):
        raise ValueError("expected an m x (m+1) augmented matrix")

    for i in range(m):
        pivot = max(range(i, m), key=lambda r: abs(rows[r][i]))
        rows[i], rows[pivot] = rows[pivot], rows[i]
        div = rows[i][i]
        if div == 0:
            raise ValueError("singular matrix")
        rows[i] = [v / div for v in rows[i]]
        for j, row in enumerate(rows):
            if j == i:
                continue
            factor = row[i]
            rows[j] = [a - factor * b for a, b in zip(row, rows[i])]

    return [row[m] for row in rows]


def polyfit(
    xs: Iterable[float], ys: Iterable[float], degree: int = DEGREE
) -> list[float]:
    """Coefficients, lowest power first, of the least-squares polynomial."""
    xs = [float(x) for x in xs]
    ys = [float(y) for y in ys]
    if len(xs) != len(ys):
        raise ValueError("xs and ys must have the same length")
    m = degree + 1
    matrix = [
        [sum(x ** (i + j) for x in xs) for j in range(m)]
        + [sum(y * x**i for x, y in zip(xs, ys))]
        for i in range(m)
    ]
    return gauss_jordan(matrix)


def format_coefficients(coeffs: Sequence[float]) -> str:
    """Equation text with the highest power first, in scientific notation."""
    terms = []
    for power in reversed(range(len(coeffs))):
        term = f"{coeffs[power]:+.6e}"
        if power > 0:
            term += f" x^{power} "
        terms.append(term)
    return "y = " + "".join(terms)


def main(argv: Sequence[str] | None = None) -> int:
    """Fit and print cubic equations for internet share and population."""
    parser = argparse.ArgumentParser(
        prog="popforecast-polyfit",
        description="Fit polynomials to internet share and population by year.",
    )
    parser.add_argument("data", nargs="?", default=DEFAULT_DATA)
    parser.add_argument("--degree", type=int, default=DEGREE)
    args = parser.parse_args(argv)

    try:
        records = read_records(args.data, limit=MAX_RECORDS)
    except OSError as exc:
        print(f"Tidak bisa membuka file: {exc}", file=sys.stderr)
        records = []
    if not records:
        print("Gagal membaca data", file=sys.stderr)
        return 1

    years = [r.year for r in records]
    c_pct = polyfit(years, [r.percentage for r in records], args.degree)
    c_pop = polyfit(years, [r.population for r in records], args.degree)

    print("a) Persentase Pengguna Internet:")
    print("   " + format_coefficients(c_pct))
    print()
    print("b) Pertumbuhan Populasi:")
    print("   " + format_coefficients(c_pop))
    return 0