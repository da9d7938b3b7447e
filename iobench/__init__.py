"""Buffered I/O Benchmark"""

from .base import IOStrategy, Operation, TrialRecord
from .timer import Timer
from .filesystem import FileIOBenchmark
from .recorder import CsvSerializer, FileRecorder, RecorderError
from .metrics import ResultsCollector
from .runner import RunSummary, run_trial_matrix
from .visualize import generate_all_plots

__all__ = [
    'IOStrategy',
    'Operation',
    'TrialRecord',
    'Timer',
    'FileIOBenchmark',
    'CsvSerializer',
    'FileRecorder',
    'RecorderError',
    'ResultsCollector',
    'RunSummary',
    'run_trial_matrix',
    'generate_all_plots'
]
