import pytest

from popforecast.csvdata import Record, read_records


def _write(tmp_path, text):
    path = tmp_path / "data.csv"
    path.write_text(text, encoding="utf-8")
    return path


def test_reads_rows_after_header(tmp_path):
    path = _write(tmp_path, "Year,Percentage,Population\n2000,1.5,1000\n2001,2.5,1100\n")
    assert read_records(path) == [Record(2000, 1.5, 1000), Record(2001, 2.5, 1100)]


def test_header_only_gives_no_records(tmp_path):
    path = _write(tmp_path, "Year,Percentage,Population\n")
    assert read_records(path) == []


def test_empty_file_gives_no_records(tmp_path):
    path = _write(tmp_path, "")
    assert read_records(path) == []


def test_malformed_rows_are_skipped(tmp_path):
    path = _write(
        tmp_path,
        "Year,Percentage,Population\n2000,1.5,1000\n\nbad,row,here\n2001,2.5\n2002,3.5,1200\n",
    )
    records = read_records(path)
    assert [r.year for r in records] == [2000, 2002]


def test_limit_caps_the_number_of_records(tmp_path):
    lines = "".join(f"{2000 + i},{i}.0,{1000 + i}\n" for i in range(10))
    path = _write(tmp_path, "Year,Percentage,Population\n" + lines)
    records = read_records(path, limit=4)
    assert len(records) == 4
    assert records[-1].year == 2003


def test_population_keeps_integer_or_float(tmp_path):
    path = _write(tmp_path, "Year,Percentage,Population\n2000,1.5,1000\n2001,2.5,1.5e6\n")
    first, second = read_records(path)
    assert isinstance(first.population, int)
    assert second.population == float("1.5e6")


def test_missing_file_raises(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_records(tmp_path / "missing.csv")