"""Прогон матрицы испытаний"""

from dataclasses import dataclass, field
from typing import List, Optional, Sequence

from .base import Operation, TrialRecord
from .filesystem import FileIOBenchmark
from .metrics import ResultsCollector
from .recorder import FileRecorder
from .workloads import WorkloadConfig, build_trial_matrix


@dataclass
class RunSummary:
    """Итог прогона"""
    records: List[TrialRecord] = field(default_factory=list)
    errors: int = 0


def run_trial_matrix(benchmark: FileIOBenchmark, recorder: FileRecorder,
                     number_of_bytes: int = WorkloadConfig.NUMBER_OF_BYTES_TO_WRITE,
                     block_sizes: Sequence[int] = WorkloadConfig.BLOCK_SIZES,
                     collector: Optional[ResultsCollector] = None) -> RunSummary:
    """
    Выполнить все испытания матрицы по порядку.

    Каждый результат сразу записывается в recorder. Испытание с ошибкой
    ввода-вывода не записывается, прогон продолжается. RecorderError
    пробрасывается вызывающему.
    """
    summary = RunSummary()
    matrix = build_trial_matrix(block_sizes)
    current_group = None

    for i, (operation, strategy, block_size) in enumerate(matrix, start=1):
        group = (operation, strategy.buffered)
        if group != current_group:
            current_group = group
            mode = "with" if strategy.buffered else "without"
            print(f"\n*** BENCHMARKING {operation.value} OPERATIONS ({mode} BufferedStream)")

        print(f"[{i}/{len(matrix)}] ", end="")
        if operation is Operation.WRITE:
            duration = benchmark.produce_test_data(strategy, number_of_bytes, block_size)
        else:
            duration = benchmark.consume_test_data(strategy, block_size)
            if duration is not None and benchmark.last_bytes_read != number_of_bytes:
                print(f"  ⚠️  Read {benchmark.last_bytes_read} bytes, expected {number_of_bytes} "
                      f"(stale test data file?)")

        if duration is None:
            summary.errors += 1
            print(f"  ⚠️  Skipping record for {operation.value}/{strategy.value}/{block_size}")
            continue

        record = TrialRecord(
            operation=operation,
            strategy=strategy,
            block_size=block_size,
            file_size_in_bytes=number_of_bytes,
            duration_in_ms=duration,
        )
        recorder.record(record)
        summary.records.append(record)
        if collector is not None:
            collector.add_result(record)

    return summary
