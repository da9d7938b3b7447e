"""Базовые типы для бенчмарка"""

from dataclasses import dataclass, asdict
from enum import Enum


class Operation(Enum):
    """Тип операции в испытании"""
    WRITE = "WRITE"
    READ = "READ"


class IOStrategy(Enum):
    """Стратегии ввода-вывода: буферизация × размер порции"""
    BYTE_BY_BYTE_WITHOUT_BUFFERED_STREAM = "ByteByByteWithoutBufferedStream"
    BYTE_BY_BYTE_WITH_BUFFERED_STREAM = "ByteByByteWithBufferedStream"
    BLOCK_BY_BLOCK_WITHOUT_BUFFERED_STREAM = "BlockByBlockWithoutBufferedStream"
    BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM = "BlockByBlockWithBufferedStream"

    @property
    def buffered(self) -> bool:
        """Оборачивается ли поток буферизующим слоем"""
        return self in (IOStrategy.BYTE_BY_BYTE_WITH_BUFFERED_STREAM,
                        IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM)

    @property
    def blockwise(self) -> bool:
        """Передаются ли данные блоками block_size"""
        return self in (IOStrategy.BLOCK_BY_BLOCK_WITHOUT_BUFFERED_STREAM,
                        IOStrategy.BLOCK_BY_BLOCK_WITH_BUFFERED_STREAM)


@dataclass(frozen=True)
class TrialRecord:
    """Результат одного испытания"""
    operation: Operation
    strategy: IOStrategy
    block_size: int
    file_size_in_bytes: int
    duration_in_ms: int

    def __post_init__(self):
        if self.block_size < 0:
            raise ValueError(f"block_size must be >= 0, got {self.block_size}")
        if self.file_size_in_bytes <= 0:
            raise ValueError(
                f"file_size_in_bytes must be > 0, got {self.file_size_in_bytes}")
        if self.duration_in_ms < 0:
            raise ValueError(
                f"duration_in_ms must be >= 0, got {self.duration_in_ms}")

    def to_dict(self):
        data = asdict(self)
        data['operation'] = self.operation.value
        data['strategy'] = self.strategy.value
        return data
