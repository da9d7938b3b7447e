#!/usr/bin/env python3
"""
Buffered I/O Benchmark Tool
Сравнение записи и чтения файла побайтово/поблочно, с буфером и без
"""
import sys
import argparse
from pathlib import Path

from iobench import (
    FileIOBenchmark,
    FileRecorder,
    RecorderError,
    ResultsCollector,
    run_trial_matrix,
    generate_all_plots
)
from iobench.workloads import WorkloadConfig


def positive_int(value: str) -> int:
    """Тип для argparse: целое > 0"""
    number = int(value)
    if number <= 0:
        raise argparse.ArgumentTypeError(f"expected a positive integer, got {value}")
    return number


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Buffered I/O Benchmark Tool',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Full run: 10 MB files, block sizes 500/50/5, report in fileData.csv
  python3 main.py

  # Smaller files in a scratch directory, no plots
  python3 main.py --size 1048576 --work-dir /tmp/iobench --no-plots

  # Custom block sizes
  python3 main.py --block-sizes 4096 512 64
        """
    )

    parser.add_argument('--output', default=WorkloadConfig.REPORT_FILE,
                        help='CSV report file')
    parser.add_argument('--work-dir', default='.',
                        help='Directory for the test data files')
    parser.add_argument('--prefix', default=WorkloadConfig.FILENAME_PREFIX,
                        help='Test data file name prefix')
    parser.add_argument('--size', type=positive_int,
                        default=WorkloadConfig.NUMBER_OF_BYTES_TO_WRITE,
                        help='Number of bytes to write per test file')
    parser.add_argument('--block-sizes', nargs='+', type=positive_int,
                        default=list(WorkloadConfig.BLOCK_SIZES),
                        help='Block sizes for block-by-block strategies')
    parser.add_argument('--buffer-size', type=positive_int,
                        default=WorkloadConfig.BUFFER_SIZE,
                        help='Buffer size of buffered streams')
    parser.add_argument('--output-dir', default='benchmark_results',
                        help='Output directory for raw data, report and plots')
    parser.add_argument('--no-plots', action='store_true',
                        help='Do not generate plots')
    parser.add_argument('--no-report', action='store_true',
                        help='Do not write raw data and text report')
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    print("=" * 80)
    print("BUFFERED I/O BENCHMARK")
    print("=" * 80)
    print(f"File size:    {args.size} bytes")
    print(f"Block sizes:  {', '.join(str(b) for b in args.block_sizes)}")
    print(f"Buffer size:  {args.buffer_size}")
    print(f"Work dir:     {args.work_dir}")
    print(f"Report:       {args.output}")
    print("=" * 80)

    benchmark = FileIOBenchmark(
        work_dir=args.work_dir,
        prefix=args.prefix,
        buffer_size=args.buffer_size
    )
    recorder = FileRecorder(args.output)
    collector = ResultsCollector()

    try:
        recorder.init()
    except RecorderError as e:
        print(f"❌ {e}")
        return 1

    failed = False
    try:
        summary = run_trial_matrix(
            benchmark, recorder,
            number_of_bytes=args.size,
            block_sizes=args.block_sizes,
            collector=collector
        )
    except RecorderError as e:
        print(f"❌ {e}")
        failed = True
    finally:
        try:
            recorder.close()
        except RecorderError as e:
            print(f"❌ {e}")
            failed = True

    if failed:
        return 1

    output_dir = Path(args.output_dir)

    if not args.no_report and collector.results:
        print("\n" + "=" * 80)
        print("SAVING RESULTS")
        print("=" * 80)
        collector.save_raw_data(output_dir)
        collector.generate_report(output_dir)

    if not args.no_plots and collector.results:
        generate_all_plots(collector.results, output_dir)

    print("\n" + "=" * 80)
    print("✅ BENCHMARK COMPLETED")
    print("=" * 80)
    print(f"\nTrials recorded: {len(summary.records)}")
    if summary.errors:
        print(f"⚠️  Trials failed:  {summary.errors}")
    print(f"CSV report:      {Path(args.output).absolute()}")
    print()
    return 0


if __name__ == '__main__':
    sys.exit(main())
