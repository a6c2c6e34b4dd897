import pytest

from popforecast.csvdata import Record
from popforecast.regression import (
    evaluate_polynomial,
    format_polynomial,
    main,
    normalize_years,
    polynomial_regression,
    predict,
)


def _records(slope=2.0):
    records = []
    for year in range(1990, 2021, 2):
        pct = slope * (year - 1994) if year >= 1994 else 999.0
        records.append(Record(year, pct, 1000 + 10 * (year - 1990)))
    return records


def test_regression_recovers_cubic():
    coeffs = [2.0, -1.0, 3.0, 0.5]
    xs = [i / 10 for i in range(11)]
    ys = [sum(c * x**p for p, c in enumerate(coeffs)) for x in xs]
    assert polynomial_regression(xs, ys, 3) == pytest.approx(coeffs, abs=1e-7)


def test_regression_fitted_values_match_data():
    xs = [i / 5 for i in range(6)]
    ys = [1.0 + 4.0 * x - x * x for x in xs]
    coeffs = polynomial_regression(xs, ys, 2)
    assert [evaluate_polynomial(x, coeffs) for x in xs] == pytest.approx(ys)


def test_regression_without_points_raises():
    with pytest.raises(ValueError):
        polynomial_regression([], [], 3)


def test_evaluate_polynomial_invariants():
    coeffs = [1.5, -2.0, 0.25, 4.0]
    assert evaluate_polynomial(0.0, coeffs) == coeffs[0]
    assert evaluate_polynomial(1.0, coeffs) == pytest.approx(sum(coeffs))


def test_format_polynomial_unit_coefficients():
    assert format_polynomial([5.0, -1.0]) == "y =  - x + 5"
    assert format_polynomial([0.0, 0.0, 1.0]) == "y = x^2"


def test_format_polynomial_skips_zero_terms():
    assert format_polynomial([1.5, 0.0, -2.0]) == "y =  - 2x^2 + 1.5"


def test_normalize_years_range():
    years = [2005, 1990, 2020, 2000]
    values, origin, scale = normalize_years(years)
    assert origin == min(years)
    assert scale == max(years) - min(years)
    assert min(values) == 0.0
    assert max(values) == 1.0


def test_normalize_constant_years_uses_unit_scale():
    values, origin, scale = normalize_years([2000, 2000])
    assert scale == 1.0
    assert values == [0.0, 0.0]
    assert origin == 2000


def test_normalize_empty_raises():
    with pytest.raises(ValueError):
        normalize_years([])


def test_predict_reproduces_linear_data():
    records = _records()
    (prediction,) = predict(records, [2000])
    known = next(r for r in records if r.year == 2000)
    assert prediction.year == 2000
    assert prediction.population == pytest.approx(known.population, rel=1e-6)
    assert prediction.internet_percentage == pytest.approx(known.percentage, abs=1e-6)


def test_predict_clamps_internet_share_high():
    (prediction,) = predict(_records(slope=5.0), [2100])
    assert prediction.internet_percentage == 100.0


def test_predict_clamps_internet_share_low():
    (prediction,) = predict(_records(slope=-1.0), [2100])
    assert prediction.internet_percentage == 0.0


def test_predict_needs_recent_internet_data():
    records = [Record(year, 1.0, 1000 + year) for year in range(1980, 1990)]
    with pytest.raises(ValueError):
        predict(records, [2030])


def test_main_prints_report(tmp_path, capsys):
    records = _records()
    data = tmp_path / "data.csv"
    data.write_text(
        "Year,Percentage,Population\n"
        + "".join(f"{r.year},{r.percentage},{r.population}\n" for r in records)
    )
    assert main([str(data)]) == 0
    out = capsys.readouterr().out
    assert out.startswith(f"Membaca {len(records)} baris data\n\n")
    assert "=== Hasil Prediksi ===" in out
    assert "Tahun 2030:" in out
    assert "Tahun 2035:" in out


def test_main_missing_file_fails(tmp_path, capsys):
    assert main([str(tmp_path / "missing.csv")]) == 1
    assert "No data read" in capsys.readouterr().out