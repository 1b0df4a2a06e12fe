import csv
import random

import pytest

from prioqueue.benchmark import (
    CSV_HEADER,
    BenchmarkResult,
    benchmark_size,
    main,
    random_value,
    run_benchmarks,
    save_results_csv,
)


def test_random_value_within_bounds():
    rng = random.Random(1)
    values = [random_value(3, 9, rng) for _ in range(200)]
    assert min(values) >= 3
    assert max(values) <= 9


def test_random_value_single_point():
    assert random_value(5, 5, random.Random(0)) == 5


def test_benchmark_size_reports_size_and_nonnegative_times():
    result = benchmark_size(20, 10, random.Random(0))
    assert result.size == 20
    assert all(value >= 0 for value in result.as_row())


def test_benchmark_size_rejects_empty_queue():
    with pytest.raises(ValueError):
        benchmark_size(0, 10, random.Random(0))


def test_benchmark_size_rejects_zero_tests():
    with pytest.raises(ValueError):
        benchmark_size(10, 0, random.Random(0))


def test_run_benchmarks_keeps_order():
    results = run_benchmarks([5, 15, 10], 5, random.Random(2))
    assert [result.size for result in results] == [5, 15, 10]


def test_save_results_round_trip(tmp_path):
    results = [
        BenchmarkResult(10, 1, 2, 3, 4, 5),
        BenchmarkResult(20, 6, 7, 8, 9, 10),
    ]
    path = tmp_path / "out.csv"
    save_results_csv(results, path)
    with open(path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == list(CSV_HEADER)
    assert [[int(cell) for cell in row] for row in rows[1:]] == [
        result.as_row() for result in results
    ]


def test_main_writes_csv(tmp_path, capsys):
    path = tmp_path / "results.csv"
    code = main(["--sizes", "8", "12", "--num-tests", "4", "--seed", "3",
                 "--output", str(path)])
    assert code == 0
    with open(path, newline="", encoding="utf-8") as handle:
        rows = list(csv.reader(handle))
    assert rows[0] == list(CSV_HEADER)
    assert [row[0] for row in rows[1:]] == ["8", "12"]
    assert "Testy dla rozmiaru: 12" in capsys.readouterr().out