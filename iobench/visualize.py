"""Визуализация результатов бенчмарков"""

import numpy as np
import matplotlib.pyplot as plt
from pathlib import Path
from typing import List

from .base import IOStrategy, Operation, TrialRecord
from .metrics import throughput_mbps


COLORS = {
    IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM: '#2ecc71',
    IOStrategy.BYTE_BY_BYTE_WITH_BUFFERED_STREAM: '#3498db',
    IOStrategy.BLOCK_BY_BLOCK_WITHOUT_BUFFERED_STREAM: '#f39c12',
    IOStrategy.BYTE_BY_BYTE_WITHOUT_BUFFERED_STREAM: '#e74c3c',
}


def generate_all_plots(results: List[TrialRecord], output_dir: Path) -> List[Path]:
    """Генерация всех графиков"""
    if not results:
        print("⚠️  No results to plot")
        return []

    output_dir.mkdir(parents=True, exist_ok=True)

    print("\n📊 Generating plots...")

    paths = [
        output_dir / "01_write_durations.png",
        output_dir / "02_read_durations.png",
        output_dir / "03_throughput_comparison.png",
    ]

    # 1-2. Длительность записи и чтения
    plot_durations(results, Operation.WRITE, paths[0])
    plot_durations(results, Operation.READ, paths[1])

    # 3. Средняя пропускная способность
    plot_throughput_comparison(results, paths[2])

    print(f"✅ All plots saved to {output_dir}/")
    return paths


def plot_durations(results: List[TrialRecord], operation: Operation, output_path: Path):
    """Длительность испытаний по стратегиям и размерам блока"""
    results = [r for r in results if r.operation is operation]

    # Группируем по размеру блока
    block_sizes = sorted({r.block_size for r in results}, reverse=True)
    strategies = [s for s in IOStrategy if any(r.strategy is s for r in results)]

    fig, ax = plt.subplots(figsize=(14, 8))

    x = np.arange(len(block_sizes))
    width = 0.8 / max(1, len(strategies))

    for i, strategy in enumerate(strategies):
        durations = {r.block_size: r.duration_in_ms for r in results if r.strategy is strategy}
        values = [durations.get(b, 0) for b in block_sizes]
        offset = width * (i - len(strategies)/2 + 0.5)
        bars = ax.bar(x + offset, values, width,
                      label=strategy.value, color=COLORS[strategy])

        for bar in bars:
            height = bar.get_height()
            if height > 0:
                ax.text(bar.get_x() + bar.get_width()/2., height,
                        f'{height:.0f}',
                        ha='center', va='bottom', fontsize=9)

    ax.set_xlabel('Block size (0 = byte by byte)', fontsize=12, fontweight='bold')
    ax.set_ylabel('Duration (ms)', fontsize=12, fontweight='bold')
    ax.set_title(f'{operation.value} duration by strategy',
                 fontsize=14, fontweight='bold', pad=20)
    ax.set_xticks(x)
    ax.set_xticklabels([str(b) for b in block_sizes], fontsize=10)
    if strategies:
        ax.legend(fontsize=10, loc='upper left')
    ax.grid(axis='y', alpha=0.3, linestyle='--')

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"  ✓ {output_path.name}")


def plot_throughput_comparison(results: List[TrialRecord], output_path: Path):
    """Средняя пропускная способность стратегий для записи и чтения"""
    strategies = list(IOStrategy)
    operations = list(Operation)

    fig, ax = plt.subplots(figsize=(14, 8))

    x = np.arange(len(strategies))
    width = 0.35

    for i, operation in enumerate(operations):
        values = []
        for strategy in strategies:
            samples = [throughput_mbps(r) for r in results
                       if r.operation is operation and r.strategy is strategy]
            values.append(np.mean(samples) if samples else 0.0)

        offset = width * (i - len(operations)/2 + 0.5)
        bars = ax.bar(x + offset, values, width, label=operation.value,
                      alpha=0.9 if operation is Operation.WRITE else 0.6,
                      color=[COLORS[s] for s in strategies])

        for bar in bars:
            height = bar.get_height()
            if height > 0:
                ax.text(bar.get_x() + bar.get_width()/2., height,
                        f'{height:.1f}',
                        ha='center', va='bottom', fontsize=9)

    ax.set_xlabel('Strategy', fontsize=12, fontweight='bold')
    ax.set_ylabel('Throughput (MB/s)', fontsize=12, fontweight='bold')
    ax.set_title('Mean throughput (write vs read)',
                 fontsize=14, fontweight='bold', pad=20)
    ax.set_xticks(x)
    ax.set_xticklabels([s.value.replace('With', '\nWith') for s in strategies], fontsize=9)
    ax.legend(fontsize=11, loc='upper right')
    ax.grid(axis='y', alpha=0.3, linestyle='--')

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"  ✓ {output_path.name}")
