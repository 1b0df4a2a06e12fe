"""Timing benchmark for the linked-list priority queue."""

from __future__ import annotations

import argparse
import csv
import random
import sys
import time
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Optional, Sequence

from prioqueue.linked_queue import LinkedPriorityQueue

DEFAULT_SIZES = (100, 1000, 10000, 50000)
DEFAULT_NUM_TESTS = 1000
DEFAULT_OUTPUT = "wyniki_testow_kolejek.csv"
CSV_HEADER = (
    "Rozmiar",
    "LinkedList-Push",
    "LinkedList-Pop",
    "LinkedList-Peek",
    "LinkedList-ChangeP",
    "LinkedList-Size",
)
MIN_PRIORITY = 1
MAX_PRIORITY = 100


@dataclass(frozen=True)
class BenchmarkResult:
    """Average time in nanoseconds of each operation for one queue size."""

    size: int
    push_ns: int
    pop_ns: int
    peek_ns: int
    change_priority_ns: int
    size_ns: int

    def as_row(self) -> list[int]:
        return [
            self.size,
            self.push_ns,
            self.pop_ns,
            self.peek_ns,
            self.change_priority_ns,
            self.size_ns,
        ]


def random_value(low: int, high: int, rng: Optional[random.Random] = None) -> int:
    """Return a uniformly chosen integer in [low, high]."""
    return (rng or random).randint(low, high)


def _priority(rng: random.Random) -> int:
    return random_value(MIN_PRIORITY, MAX_PRIORITY, rng)


def _timed(action) -> int:
    start = time.perf_counter_ns()
    action()
    return time.perf_counter_ns() - start


def benchmark_size(
    size: int,
    num_tests: int = DEFAULT_NUM_TESTS,
    rng: Optional[random.Random] = None,
) -> BenchmarkResult:
    """Fill a queue with ``size`` entries and time each operation ``num_tests`` times."""
    if size < 1:
        raise ValueError("size must be at least 1")
    if num_tests < 1:
        raise ValueError("num_tests must be at least 1")
    rng = rng or random.Random()

    queue = LinkedPriorityQueue()
    elements = [(value, _priority(rng)) for value in range(size)]
    for value, priority in elements:
        queue.push(value, priority)

    total = 0
    for j in range(num_tests):
        value, priority = size + j, _priority(rng)
        total += _timed(lambda: queue.push(value, priority))
        if j < num_tests - 1:
            queue.pop()
    push_ns = total // num_tests

    total = 0
    for j in range(num_tests):
        queue.push(2 * size + j, _priority(rng))
        total += _timed(queue.pop)
    pop_ns = total // num_tests

    total = sum(_timed(queue.peek) for _ in range(num_tests))
    peek_ns = total // num_tests

    total = 0
    for j in range(num_tests):
        value = elements[j % len(elements)][0]
        priority = _priority(rng)
        total += _timed(lambda: queue.change_priority(value, priority))
    change_ns = total // num_tests

    total = sum(_timed(lambda: len(queue)) for _ in range(num_tests))
    size_ns = total // num_tests

    return BenchmarkResult(size, push_ns, pop_ns, peek_ns, change_ns, size_ns)


def run_benchmarks(
    sizes: Iterable[int] = DEFAULT_SIZES,
    num_tests: int = DEFAULT_NUM_TESTS,
    rng: Optional[random.Random] = None,
) -> list[BenchmarkResult]:
    """Benchmark every size in turn."""
    rng = rng or random.Random()
    return [benchmark_size(size, num_tests, rng) for size in sizes]


def save_results_csv(
    results: Iterable[BenchmarkResult], path: str | Path = DEFAULT_OUTPUT
) -> None:
    """Write the results as CSV, one row per queue size."""
    with open(path, "w", newline="", encoding="utf-8") as handle:
        writer = csv.writer(handle, lineterminator="\n")
        writer.writerow(CSV_HEADER)
        writer.writerows(result.as_row() for result in results)


def _print_result(result: BenchmarkResult) -> None:
    print("\n===================================")
    print(f"Testy dla rozmiaru: {result.size}")
    print("===================================")
    print(f"LinkedList dodaj element (push): {result.push_ns} ns")
    print(f"LinkedList usun element (pop): {result.pop_ns} ns")
    print(f"LinkedList podglad elementu (peek): {result.peek_ns} ns")
    print(f"LinkedList zmiana priorytetu (changeP): {result.change_priority_ns} ns")
    print(f"LinkedList sprawdzanie rozmiaru (size): {result.size_ns} ns")


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = argparse.ArgumentParser(description="Benchmark the priority queue.")
    parser.add_argument(
        "--sizes", type=int, nargs="+", default=list(DEFAULT_SIZES),
        help="queue sizes to benchmark",
    )
    parser.add_argument(
        "--num-tests", type=int, default=DEFAULT_NUM_TESTS,
        help="repetitions of each operation",
    )
    parser.add_argument("--output", default=DEFAULT_OUTPUT, help="CSV output path")
    parser.add_argument("--seed", type=int, default=None, help="random seed")
    args = parser.parse_args(argv)

    print("===== TESTY WYDAJNOSCI KOLEJEK PRIORYTETOWYCH =====")
    rng = random.Random(args.seed)
    results = []
    for size in args.sizes:
        result = benchmark_size(size, args.num_tests, rng)
        _print_result(result)
        results.append(result)

    try:
        save_results_csv(results, args.output)
    except OSError:
        print("Błąd: Nie można otworzyć pliku do zapisu wyników!", file=sys.stderr)
        return 0
    print(f"Wyniki zapisane do pliku '{args.output}'")
    return 0


if __name__ == "__main__":
    sys.exit(main())