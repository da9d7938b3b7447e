"""Конфигурация нагрузки и матрица испытаний"""

import io
from typing import List, Sequence, Tuple

from .base import IOStrategy, Operation


class WorkloadConfig:
    """Конфигурация нагрузки"""

    # Тестовые файлы
    FILENAME_PREFIX = "test-data"
    NUMBER_OF_BYTES_TO_WRITE = 10 * 1024 * 1024  # 10 MB

    # Размеры блоков для блочных стратегий
    BLOCK_SIZES = (500, 50, 5)

    # Байты-заполнители
    BYTE_FILLER = b"h"
    BLOCK_FILLER = b"b"
    REMAINDER_FILLER = b"B"

    # Размер буфера для буферизованных стратегий
    BUFFER_SIZE = io.DEFAULT_BUFFER_SIZE

    # Отчет
    REPORT_FILE = "fileData.csv"


# Сначала с буферизацией, потом без
STRATEGY_ORDER = (
    IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM,
    IOStrategy.BYTE_BY_BYTE_WITH_BUFFERED_STREAM,
    IOStrategy.BLOCK_BY_BLOCK_WITHOUT_BUFFERED_STREAM,
    IOStrategy.BYTE_BY_BYTE_WITHOUT_BUFFERED_STREAM,
)


def build_trial_matrix(block_sizes: Sequence[int] = WorkloadConfig.BLOCK_SIZES
                       ) -> List[Tuple[Operation, IOStrategy, int]]:
    """
    Матрица испытаний: все записи, затем все чтения.
    Побайтовые стратегии получают единственный размер блока 0.
    """
    matrix = []
    for operation in (Operation.WRITE, Operation.READ):
        for strategy in STRATEGY_ORDER:
            sizes = block_sizes if strategy.blockwise else (0,)
            for block_size in sizes:
                matrix.append((operation, strategy, block_size))
    return matrix
