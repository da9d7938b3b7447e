"""Сериализация результатов и запись в CSV-отчет"""

from pathlib import Path
from typing import Optional

from .base import TrialRecord


CSV_HEADER = "operation,strategy,blockSize,fileSizeInBytes,durationInMs"


class RecorderError(Exception):
    """Ошибка записи отчета"""


class CsvSerializer:
    """Одна строка CSV на одно испытание"""

    def serialize(self, record: TrialRecord) -> str:
        return ",".join(str(value) for value in (
            record.operation.value,
            record.strategy.value,
            record.block_size,
            record.file_size_in_bytes,
            record.duration_in_ms,
        ))


class FileRecorder:
    """
    Пишет результаты испытаний в CSV-файл.

    Жизненный цикл: init() -> record() * N -> close().
    close() можно вызывать повторно и до init().
    """

    def __init__(self, file_name: str = "fileData.csv",
                 serializer: Optional[CsvSerializer] = None):
        self.file_name = Path(file_name)
        self.serializer = serializer or CsvSerializer()
        self._file = None

    def init(self):
        """Создать (или обрезать) файл отчета и записать заголовок"""
        try:
            self._file = open(self.file_name, 'w', encoding='utf-8')
            self._file.write(CSV_HEADER + "\n")
            self._file.flush()
        except OSError as e:
            self.close()
            raise RecorderError(f"Cannot initialize report {self.file_name}: {e}") from e

    def record(self, record: TrialRecord):
        """Дописать одну строку и сбросить ее на диск"""
        if self._file is None:
            raise RecorderError("Recorder is not initialized (call init() first)")
        try:
            self._file.write(self.serializer.serialize(record) + "\n")
            self._file.flush()
        except OSError as e:
            raise RecorderError(f"Cannot write to report {self.file_name}: {e}") from e

    def close(self):
        """Закрыть файл отчета (идемпотентно)"""
        if self._file is None:
            return
        f, self._file = self._file, None
        try:
            f.close()
        except OSError as e:
            raise RecorderError(f"Cannot close report {self.file_name}: {e}") from e

    def __enter__(self):
        self.init()
        return self

    def __exit__(self, exc_type, exc_val, exc_tb):
        self.close()
        return False
