"""Сбор и обработка метрик"""

import json
from pathlib import Path
from typing import List, Dict
from datetime import datetime

import numpy as np

from .base import IOStrategy, Operation, TrialRecord


BYTES_PER_MB = 1024 * 1024


def throughput_mbps(record: TrialRecord) -> float:
    """Пропускная способность в MB/s (0 для нулевой длительности)"""
    if record.duration_in_ms <= 0:
        return 0.0
    return (record.file_size_in_bytes / BYTES_PER_MB) / (record.duration_in_ms / 1000)


class ResultsCollector:
    """Сборщик результатов всех испытаний одного прогона"""

    def __init__(self):
        self.results: List[TrialRecord] = []
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    def add_result(self, result: TrialRecord):
        """Добавить результат испытания"""
        self.results.append(result)

    def save_raw_data(self, output_dir: Path) -> Path:
        """Сохранить сырые данные в JSON"""
        output_dir.mkdir(parents=True, exist_ok=True)

        data = {
            'timestamp': self.timestamp,
            'results': [r.to_dict() for r in self.results]
        }

        output_file = output_dir / f"benchmark_raw_{self.timestamp}.json"
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        print(f"\n✅ Raw data saved: {output_file}")
        return output_file

    def generate_report(self, output_dir: Path) -> str:
        """Генерация текстового отчета"""
        output_dir.mkdir(parents=True, exist_ok=True)

        report_lines = []
        report_lines.append("=" * 80)
        report_lines.append("BUFFERED I/O BENCHMARK REPORT")
        report_lines.append("=" * 80)
        report_lines.append(f"Timestamp: {self.timestamp}")
        report_lines.append("")

        for operation in Operation:
            results = self.get_results_by_operation(operation)
            if not results:
                continue

            report_lines.append(f"\n{'=' * 80}")
            report_lines.append(f"OPERATION: {operation.value}")
            report_lines.append('=' * 80)

            for result in results:
                report_lines.append(
                    f"  {result.strategy.value:36} block {result.block_size:>5}  "
                    f"{result.duration_in_ms:>8} ms  {throughput_mbps(result):>10.2f} MB/s")

            report_lines.append(f"\n  Buffered vs unbuffered:")
            report_lines.append(f"  {'─' * 70}")
            report_lines.extend(self._buffering_comparison(results))

        report_lines.append(f"\n{'=' * 80}")
        report_lines.append("FASTEST STRATEGIES")
        report_lines.append('=' * 80)
        report_lines.append("")
        report_lines.extend(self._fastest_strategies())

        report_lines.append("\n" + "=" * 80)

        report_text = "\n".join(report_lines)

        report_file = output_dir / f"benchmark_report_{self.timestamp}.txt"
        with open(report_file, 'w', encoding='utf-8') as f:
            f.write(report_text)

        print(f"✅ Report saved: {report_file}")
        print("\n" + report_text)

        return report_text

    def _buffering_comparison(self, results: List[TrialRecord]) -> List[str]:
        """Ускорение от буферизации для каждого размера блока"""
        lines = []
        by_key: Dict[tuple, TrialRecord] = {
            (r.strategy.blockwise, r.block_size, r.strategy.buffered): r for r in results
        }

        for (blockwise, block_size, buffered), unbuffered in sorted(by_key.items()):
            if buffered:
                continue
            with_buffer = by_key.get((blockwise, block_size, True))
            if with_buffer is None:
                continue

            mode = "block" if blockwise else "byte"
            if with_buffer.duration_in_ms > 0:
                speedup = unbuffered.duration_in_ms / with_buffer.duration_in_ms
                lines.append(f"    {mode:5} {block_size:>5}: x{speedup:.1f} faster with buffering "
                             f"({unbuffered.duration_in_ms} ms -> {with_buffer.duration_in_ms} ms)")
            else:
                lines.append(f"    {mode:5} {block_size:>5}: buffered run below timer resolution "
                             f"({unbuffered.duration_in_ms} ms unbuffered)")

        return lines

    def _fastest_strategies(self) -> List[str]:
        """Лучшая стратегия для каждой операции (по средней пропускной способности)"""
        lines = []

        for operation in Operation:
            results = self.get_results_by_operation(operation)
            if not results:
                continue

            mean_by_strategy = {}
            for strategy in IOStrategy:
                values = [throughput_mbps(r) for r in results if r.strategy is strategy]
                if values:
                    mean_by_strategy[strategy] = np.mean(values)

            best = max(mean_by_strategy, key=mean_by_strategy.get)
            lines.append(f"• {operation.value}:")
            lines.append(f"    Best: {best.value} ({mean_by_strategy[best]:.2f} MB/s)")
            lines.append("")

        return lines

    def get_results_by_operation(self, operation: Operation) -> List[TrialRecord]:
        """Получить результаты для конкретной операции"""
        return [r for r in self.results if r.operation is operation]

    def get_results_by_strategy(self, strategy: IOStrategy) -> List[TrialRecord]:
        """Получить результаты для конкретной стратегии"""
        return [r for r in self.results if r.strategy is strategy]
