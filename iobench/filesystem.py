"""Бенчмарк записи и чтения файла на локальной ФС"""

import io
from pathlib import Path
from typing import Optional

from .base import IOStrategy
from .timer import Timer
from .workloads import WorkloadConfig


class FileIOBenchmark:
    """
    Бенчмарк записи/чтения тестовых файлов по четырем стратегиям.

    Для каждой пары (strategy, block_size) создается свой тестовый файл
    в work_dir. Файлы не удаляются после прогона.
    """

    def __init__(self, work_dir: str = ".",
                 prefix: str = WorkloadConfig.FILENAME_PREFIX,
                 buffer_size: int = WorkloadConfig.BUFFER_SIZE):
        self.work_dir = Path(work_dir)
        self.prefix = prefix
        self.buffer_size = buffer_size
        self.timer = Timer()
        self.last_bytes_written = 0
        self.last_bytes_read = 0

    def scratch_path(self, strategy: IOStrategy, block_size: int) -> Path:
        """Путь к тестовому файлу для пары (strategy, block_size)"""
        return self.work_dir / f"{self.prefix}-{strategy.value}-{block_size}.bin"

    def produce_test_data(self, strategy: IOStrategy, number_of_bytes: int,
                          block_size: int) -> Optional[int]:
        """
        Записать тестовый файл и вернуть длительность в мс.
        При ошибке ввода-вывода возвращает None.
        """
        print(f"Generating test data ({strategy.value}, {number_of_bytes} bytes, "
              f"block size: {block_size})...")
        self.timer.start()

        try:
            with open(self.scratch_path(strategy, block_size), 'wb', buffering=0) as raw:
                stream = io.BufferedWriter(raw, self.buffer_size) if strategy.buffered else raw
                with stream:
                    self.last_bytes_written = self.produce_data_to_stream(
                        stream, strategy, number_of_bytes, block_size)
        except OSError as e:
            print(f"  ❌ Write failed: {e}")
            return None

        duration = self.timer.elapsed_millis()
        print(f"  > Done in {duration} ms.")
        return duration

    def produce_data_to_stream(self, stream, strategy: IOStrategy,
                               number_of_bytes: int, block_size: int) -> int:
        """
        Записать number_of_bytes байт в поток.
        Поток может быть буферизованным или нет, метод этого не знает.
        """
        total_bytes = 0

        if not strategy.blockwise:
            for _ in range(number_of_bytes):
                total_bytes += self._write_fully(stream, WorkloadConfig.BYTE_FILLER)
            return total_bytes

        if block_size <= 0:
            raise ValueError(f"block size must be positive for {strategy.value}")

        number_of_blocks, remainder = divmod(number_of_bytes, block_size)
        block = WorkloadConfig.BLOCK_FILLER * block_size

        # Целые блоки
        for _ in range(number_of_blocks):
            total_bytes += self._write_fully(stream, block)

        # Хвост
        if remainder:
            total_bytes += self._write_fully(stream, WorkloadConfig.REMAINDER_FILLER * remainder)

        return total_bytes

    @staticmethod
    def _write_fully(stream, data: bytes) -> int:
        """
        Записать data целиком.
        Небуферизованный поток может принять только часть байт за вызов.
        """
        view = memoryview(data)
        written = 0
        while written < len(view):
            n = stream.write(view[written:])
            if not n:
                raise OSError(f"write made no progress after {written} of {len(view)} bytes")
            written += n
        return written

    def consume_test_data(self, strategy: IOStrategy, block_size: int) -> Optional[int]:
        """
        Прочитать тестовый файл и вернуть длительность в мс.
        При ошибке ввода-вывода возвращает None.
        """
        print(f"Consuming test data ({strategy.value}, block size: {block_size})...")
        self.timer.start()

        try:
            with open(self.scratch_path(strategy, block_size), 'rb', buffering=0) as raw:
                stream = io.BufferedReader(raw, self.buffer_size) if strategy.buffered else raw
                with stream:
                    self.last_bytes_read = self.consume_data_from_stream(
                        stream, strategy, block_size)
        except OSError as e:
            print(f"  ❌ Read failed: {e}")
            return None

        duration = self.timer.elapsed_millis()
        print(f"  Number of bytes read: {self.last_bytes_read}")
        print(f"  > Done in {duration} ms.")
        return duration

    def consume_data_from_stream(self, stream, strategy: IOStrategy,
                                 block_size: int) -> int:
        """Прочитать поток до конца и посчитать байты (содержимое не проверяется)"""
        total_bytes = 0

        if not strategy.blockwise:
            while stream.read(1):
                total_bytes += 1
            return total_bytes

        if block_size <= 0:
            raise ValueError(f"block size must be positive for {strategy.value}")

        block = bytearray(block_size)
        while True:
            bytes_read = stream.readinto(block)
            if not bytes_read:
                break
            total_bytes += bytes_read

        return total_bytes
