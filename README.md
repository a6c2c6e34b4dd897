# popforecast

Small tools that estimate yearly population and internet-usage percentages
from a CSV file. The file starts with a header row. Each row after it has the
form `year,percentage,population`:

```
Year,Percentage,Population
1990,0.00,181437000
2000,0.93,211540000
...
```

Rows that cannot be parsed are skipped. When a command is given no file, it
reads `Data Tugas Pemrograman A.csv` from the current directory.

## Commands

### `popforecast-interpolate`

```
popforecast-interpolate [DATA] [--years Y ...] [--output FILE] [--plot FILE] [--no-plot] [--show]
```

For each target year, the command finds the first pair of neighbouring rows
that encloses it and interpolates linearly between them. The default target
years are 2005, 2006, 2015 and 2016. The population is interpolated as a
whole number, with the step truncated toward zero. Years that no pair of rows
encloses are left out.

The command prints the estimates. It then writes the output CSV, which is
`output_with_predictions.csv` by default. That file has the columns
`Year,Percentage,Population,Type`. It holds every input row marked `Actual`,
followed by the estimates marked `Predicted`.

The command then draws a chart with twin axes: the internet percentage on one
axis and the population on the other. It saves the chart to `combined_plot.png`
by default. `--no-plot` skips the chart, and `--show` also opens it in a window.
The command reads at most 500 data rows.

### `popforecast-polyfit`

```
popforecast-polyfit [DATA] [--degree N]
```

Fits a least-squares polynomial in the raw year to the internet percentage and
to the population. The degree is 3 unless `--degree` says otherwise. The fit
solves the normal equations by Gauss–Jordan elimination with partial pivoting.
The command prints the coefficients in scientific notation, highest power
first. It reads at most 1000 data rows.

### `popforecast-regression`

```
popforecast-regression [DATA] [--degree N] [--years Y ...]
```

Scales the years onto [0, 1] and fits a polynomial to the population, using
every row. It fits a second polynomial to the internet percentage, using only
the rows from 1994 onward. The degree is 3 by default. The command prints both
equations and then the forecasts for the target years, which are 2030 and 2035
by default. The internet percentage is clamped to the range 0–100. The command
reads at most 100 data rows.

## Library use

```python
from popforecast.csvdata import read_records
from popforecast.interpolation import estimate, format_estimates, write_with_predictions
from popforecast.polyfit import polyfit, format_coefficients
from popforecast.regression import predict, format_polynomial, polynomial_regression

records = read_records("data.csv")          # list of Record(year, percentage, population)
print(format_estimates(estimate(records, [2005, 2015])))

coeffs = polyfit([r.year for r in records], [r.percentage for r in records], 3)
print(format_coefficients(coeffs))

for p in predict(records, [2030, 2035], 3):  # Prediction(year, population, internet_percentage)
    print(p.year, round(p.population), p.internet_percentage)
```

The modules and their contents:

- `popforecast.csvdata`: `Record` and `read_records(path, limit=None)`.
- `popforecast.interpolation`: `Estimate`, `linear_interpolate`,
  `interpolate_population`, `estimate`, `format_estimates`,
  `write_with_predictions` and `plot_predictions(csv_path, image_path, show=False)`.
- `popforecast.polyfit`: `gauss_jordan`, which solves an m × (m+1) augmented
  matrix, `polyfit` and `format_coefficients`.
- `popforecast.regression`: `Prediction`, `polynomial_regression`, which uses
  forward elimination without pivoting followed by back substitution,
  `evaluate_polynomial`, `format_polynomial`, `normalize_years` and `predict`.

Coefficient lists always start with the lowest power. `gauss_jordan` and
`polynomial_regression` raise `ValueError` for a singular system, and
`normalize_years` raises it for an empty input.

## Tests

```
pip install -e .[test]
pytest
```