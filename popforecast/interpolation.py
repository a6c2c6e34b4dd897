"""Linear interpolation of population and internet share between known years."""

from __future__ import annotations

import argparse
import csv
import os
import sys
from dataclasses import dataclass
from typing import Iterable, Sequence

from popforecast.csvdata import Record, read_records

DEFAULT_DATA = "Data Tugas Pemrograman A.csv"
DEFAULT_OUTPUT = "output_with_predictions.csv"
DEFAULT_PLOT = "combined_plot.png"
TARGET_YEARS = (2005, 2006, 2015, 2016)
MAX_RECORDS = 500


@dataclass(frozen=True)
class Estimate:
    """Interpolated values for one year."""

    year: int
    population: int
    percentage: float


def linear_interpolate(x0: float, y0: float, x1: float, y1: float, x: float) -> float:
    """Value at ``x`` on the line through (x0, y0) and (x1, y1)."""
    return y0 + (x - x0) * (y1 - y0) / (x1 - x0)


def interpolate_population(x0: int, y0: int, x1: int, y1: int, x: int) -> int:
    """Interpolate a whole-number quantity, truncating the step toward zero."""
    return int(y0) + int((x - x0) * (y1 - y0) / (x1 - x0))


def _bracket(records: Sequence[Record], year: int) -> tuple[Record, Record] | None:
    for left, right in zip(records, records[1:]):
        if left.year <= year <= right.year:
            return left, right
    return None


def estimate(records: Sequence[Record], years: Iterable[int]) -> list[Estimate]:
    """Estimate each year from the first pair of neighbouring records around it.

    Years outside every pair of neighbouring records are left out.
    """
    records = list(records)
    estimates = []
    for year in years:
        pair = _bracket(records, year)
        if pair is None:
            continue
        left, right = pair
        population = interpolate_population(
            left.year, int(left.population), right.year, int(right.population), year
        )
        percentage = linear_interpolate(
            left.year, left.percentage, right.year, right.percentage, year
        )
        estimates.append(Estimate(year, population, percentage))
    return estimates


def format_estimates(estimates: Iterable[Estimate]) -> str:
    """Human-readable report of the estimates."""
    return "".join(
        f"Tahun {e.year}:\n"
        f"  - Estimasi Jumlah Penduduk      : {e.population}\n"
        f"  - Estimasi Persentase Internet  : {e.percentage:.2f}%\n\n"
        for e in estimates
    )


def write_with_predictions(
    path: str | os.PathLike[str], records: Sequence[Record], years: Iterable[int]
) -> list[Estimate]:
    """Write the actual records followed by the predicted ones as CSV."""
    estimates = estimate(records, years)
    with open(path, "w", newline="", encoding="utf-8") as out:
        out.write("Year,Percentage,Population,Type\n")
        for record in records:
            out.write(
                f"{record.year},{record.percentage:.2f},{int(record.population)},Actual\n"
            )
        for est in estimates:
            out.write(f"{est.year},{est.percentage:.2f},{est.population},Predicted\n")
    return estimates


def _read_series(csv_path):
    series = {"Actual": ([], [], []), "Predicted": ([], [], [])}
    with open(csv_path, newline="", encoding="utf-8") as handle:
        reader = csv.reader(handle)
        next(reader, None)
        for year, perc, pop, kind in reader:
            years, percs, pops = series["Actual" if kind == "Actual" else "Predicted"]
            years.append(int(year))
            percs.append(float(perc))
            pops.append(int(pop))
    return series


def plot_predictions(
    csv_path: str | os.PathLike[str],
    image_path: str | os.PathLike[str],
    show: bool = False,
) -> None:
    """Plot actual and predicted values on twin axes and save the image."""
    series = _read_series(csv_path)
    years_a, perc_a, pop_a = series["Actual"]
    years_p, perc_p, pop_p = series["Predicted"]

    if show:
        import matplotlib.pyplot as plt

        fig = plt.figure(figsize=(10, 6))
    else:
        from matplotlib.figure import Figure

        fig = Figure(figsize=(10, 6))

    ax1 = fig.subplots()
    ax2 = ax1.twinx()

    ax1.plot(years_a, perc_a, "bo-", label="Internet % (Actual)")
    ax1.plot(years_p, perc_p, "ro--", label="Internet % (Predicted)")
    ax1.set_xlabel("Tahun")
    ax1.set_ylabel("Persentase Internet", color="b")
    ax1.tick_params(axis="y", labelcolor="b")

    ax2.plot(years_a, pop_a, "g^-", label="Populasi (Actual)")
    ax2.plot(years_p, pop_p, "ms--", label="Populasi (Predicted)")
    ax2.set_ylabel("Populasi (juta)", color="g")
    ax2.tick_params(axis="y", labelcolor="g")

    lines1, labels1 = ax1.get_legend_handles_labels()
    lines2, labels2 = ax2.get_legend_handles_labels()
    ax1.legend(lines1 + lines2, labels1 + labels2, loc="upper left")

    ax1.set_title("Prediksi dan Data Asli: Internet & Populasi")
    ax1.grid(True)
    fig.tight_layout()
    fig.savefig(image_path)

    if show:
        plt.show()


def main(argv: Sequence[str] | None = None) -> int:
    """Estimate the target years, write the CSV and plot it."""
    parser = argparse.ArgumentParser(
        prog="popforecast-interpolate",
        description="Interpolate population and internet share for given years.",
    )
    parser.add_argument("data", nargs="?", default=DEFAULT_DATA)
    parser.add_argument("--output", default=DEFAULT_OUTPUT)
    parser.add_argument("--plot", default=DEFAULT_PLOT)
    parser.add_argument("--no-plot", action="store_true")
    parser.add_argument("--show", action="store_true")
    parser.add_argument("--years", type=int, nargs="+", default=list(TARGET_YEARS))
    args = parser.parse_args(argv)

    try:
        records = read_records(args.data, limit=MAX_RECORDS)
    except OSError as exc:
        print(f"File tidak bisa dibuka: {exc}", file=sys.stderr)
        return 1

    print(format_estimates(estimate(records, args.years)), end="")

    try:
        write_with_predictions(args.output, records, args.years)
    except OSError as exc:
        print(f"Gagal membuka file output: {exc}", file=sys.stderr)
        return 0

    if not args.no_plot:
        plot_predictions(args.output, args.plot, show=args.show)
    return 0