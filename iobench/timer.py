"""Таймер для замера длительности испытаний"""

import time
from typing import Optional


class Timer:
    """
    Монотонный таймер с точностью до миллисекунд.

    elapsed_millis() возвращает время с последней отметки и сразу
    переставляет отметку на текущий момент, так что последовательные
    вызовы измеряют последовательные интервалы.
    """

    def __init__(self):
        self._mark: Optional[float] = None

    def start(self):
        """Поставить отметку (заменяет предыдущую)"""
        self._mark = time.perf_counter()

    def elapsed_millis(self) -> int:
        """
        Миллисекунды с последней отметки.
        Перед первым вызовом нужно вызвать start().
        """
        if self._mark is None:
            raise RuntimeError("Timer.start() must be called before elapsed_millis()")
        now = time.perf_counter()
        elapsed = now - self._mark
        self._mark = now
        return max(0, int(elapsed * 1000))
