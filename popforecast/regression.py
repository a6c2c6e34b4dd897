"""Polynomial regression on normalised years and forecasts from it."""

from __future__ import annotations

import argparse
from dataclasses import dataclass
from typing import Iterable, Sequence

from popforecast.csvdata import Record, read_records

DEFAULT_DATA = "Data Tugas Pemrograman A.csv"
DEGREE = 3
MAX_RECORDS = 100
INTERNET_START_YEAR = 1994
PREDICT_YEARS = (2030, 2035)


@dataclass(frozen=True)
class Prediction:
    """Forecast for one year."""

    year: int
    population: float
    internet_percentage: float


def polynomial_regression(
    xs: Iterable[float], ys: Iterable[float], degree: int = DEGREE
) -> list[float]:
    """Least-squares coefficients, lowest power first.

    Uses forward elimination without pivoting and back substitution;
    raises ValueError when a zero pivot is met.
    """
    xs = [float(x) for x in xs]
    ys = [float(y) for y in ys]
    size = degree + 1
    powers = [sum(x**k for x in xs) for k in range(2 * degree + 1)]
    rows = [
        [powers[i + j] for j in range(size)] + [sum(x**i * y for x, y in zip(xs, ys))]
        for i in range(size)
    ]

    for i in range(size):
        if rows[i][i] == 0:
            raise ValueError("singular system")
        for k in range(i + 1, size):
            factor = rows[k][i] / rows[i][i]
            rows[k][i:] = [a - factor * b for a, b in zip(rows[k][i:], rows[i][i:])]

    coeffs = [0.0] * size
    for i in reversed(range(size)):
        value = rows[i][size]
        for a, c in zip(rows[i][i + 1 : size], coeffs[i + 1 :]):
            value -= a * c
        coeffs[i] = value / rows[i][i]
    return coeffs


def evaluate_polynomial(x: float, coeffs: Sequence[float]) -> float:
    """Value of the polynomial with coefficients lowest power first."""
    return sum(c * x**power for power, c in enumerate(coeffs))


def format_polynomial(coeffs: Sequence[float]) -> str:
    """Readable equation, highest power first, skipping zero terms."""
    parts = ["y = "]
    first = True
    for power in reversed(range(len(coeffs))):
        c = coeffs[power]
        if c == 0:
            continue
        if c > 0 and not first:
            parts.append(" + ")
        elif c < 0:
            parts.append(" - ")
        if power == 0 or abs(c) != 1:
            parts.append(f"{abs(c):.10g}")
        if power > 0:
            parts.append("x")
            if power > 1:
                parts.append(f"^{power}")
        first = False
    return "".join(parts)


def normalize_years(years: Iterable[float]) -> tuple[list[float], float, float]:
    """Map years onto [0, 1]; return the values, the origin and the scale."""
    years = [float(y) for y in years]
    if not years:
        raise ValueError("no years to normalise")
    lowest = min(years)
    scale = (max(years) - lowest) or 1.0
    return [(y - lowest) / scale for y in years], lowest, scale


@dataclass(frozen=True)
class _Model:
    coeffs: list[float]
    origin: float
    scale: float

    def at(self, year: float) -> float:
        return evaluate_polynomial((year - self.origin) / self.scale, self.coeffs)


def _fit(years: Sequence[float], values: Sequence[float], degree: int) -> _Model:
    xs, origin, scale = normalize_years(years)
    return _Model(polynomial_regression(xs, values, degree), origin, scale)


def _fit_models(records: Sequence[Record], degree: int) -> tuple[_Model, _Model]:
    population = _fit(
        [r.year for r in records], [float(r.population) for r in records], degree
    )
    internet_records = [r for r in records if r.year >= INTERNET_START_YEAR]
    internet = _fit(
        [r.year for r in internet_records],
        [r.percentage for r in internet_records],
        degree,
    )
    return population, internet


def _predict(population: _Model, internet: _Model, years: Iterable[int]):
    return [
        Prediction(year, population.at(year), min(100.0, max(0.0, internet.at(year))))
        for year in years
    ]


def predict(
    records: Sequence[Record], years: Iterable[int], degree: int = DEGREE
) -> list[Prediction]:
    """Forecast population and internet share (clamped to 0..100) for each year.

    The internet share is fitted only on records from 1994 onward.
    """
    population, internet = _fit_models(list(records), degree)
    return _predict(population, internet, years)


def main(argv: Sequence[str] | None = None) -> int:
    """Fit both series, print the equations and the forecasts."""
    parser = argparse.ArgumentParser(
        prog="popforecast-regression",
        description="Forecast population and internet share by polynomial regression.",
    )
    parser.add_argument("data", nargs="?", default=DEFAULT_DATA)
    parser.add_argument("--degree", type=int, default=DEGREE)
    parser.add_argument("--years", type=int, nargs="+", default=list(PREDICT_YEARS))
    args = parser.parse_args(argv)

    try:
        records = read_records(args.data, limit=MAX_RECORDS)
    except OSError:
        print("Error opening file")
        records = []
    if not records:
        print("No data read")
        return 1

    print(f"Membaca {len(records)} baris data\n")

    population, internet = _fit_models(records, args.degree)
    print("Persamaan polinomial untuk pertumbuhan populasi:")
    print(format_polynomial(population.coeffs))
    print("Persamaan polinomial untuk persentase pengguna internet:")
    print(format_polynomial(internet.coeffs))

    print("\n=== Hasil Prediksi ===")
    for p in _predict(population, internet, args.years):
        print(f"Tahun {p.year}:")
        print(f"Jumlah Penduduk: {p.population:.0f}")
        print(f"Persentase Pengguna Internet: {p.internet_percentage:.4f}%\n")
    return 0