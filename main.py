#!/usr/bin/env python3
"""
Random I/O Tester
Сравнение задержек случайного чтения: файловый дескриптор vs mmap
"""
import sys
import time
import logging
import argparse
from pathlib import Path

from iobench import (
    BenchmarkConfig,
    BenchmarkSetupError,
    MetricsCollector,
    cleanup_test_files,
    create_test_files,
    generate_all_plots,
    run_benchmark,
)
from iobench.workloads import Defaults


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description='Random I/O latency tester',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Standard I/O, defaults
  python3 main.py

  # Memory-mapped, 8 threads, save report and plots
  python3 main.py -m -t 8 --output-dir iobench_results
        """
    )

    parser.add_argument('-f', '--num-files', type=int, default=Defaults.NUM_FILES,
                        help='Number of files to create')
    parser.add_argument('-s', '--file-size', type=int, default=Defaults.FILE_SIZE,
                        help='Size of each file in bytes')
    parser.add_argument('-w', '--wait-time', type=float, default=Defaults.WAIT_TIME,
                        help='Waiting time after file creation in seconds')
    parser.add_argument('-t', '--num-threads', type=int, default=Defaults.NUM_THREADS,
                        help='Number of threads for read operations')
    parser.add_argument('--seed', type=int, default=Defaults.SEED,
                        help='Random seed for reproducible experiments')
    parser.add_argument('-b', '--block-size', type=int, default=Defaults.BLOCK_SIZE,
                        help='Size of blocks to read in bytes')
    parser.add_argument('-n', '--num-operations', type=int, default=Defaults.NUM_OPERATIONS,
                        help='Number of read operations to perform')
    parser.add_argument('-m', '--use-mmap', action='store_true',
                        help='Use memory-mapped files instead of standard I/O')
    parser.add_argument('--file-prefix', default=Defaults.FILE_PREFIX,
                        help='Prefix for test files')
    parser.add_argument('--data-dir', default='.',
                        help='Directory for test files')
    parser.add_argument('--output-dir', default=None,
                        help='Save JSON data, text report and plots here')
    parser.add_argument('--keep-files', action='store_true',
                        help='Do not delete test files after the run')
    parser.add_argument('-v', '--verbose', action='store_true',
                        help='Verbose logging')
    return parser


def print_config(config: BenchmarkConfig):
    print("🚀 Random I/O Tester Starting...")
    print("Configuration:")
    print(f"  Files: {config.num_files} × {config.file_size} bytes")
    print(f"  Threads: {config.num_threads}")
    print(f"  Block size: {config.block_size} bytes")
    print(f"  Operations: {config.num_operations}")
    print(f"  Mode: {'Memory-mapped' if config.use_mmap else 'Standard I/O'}")
    print(f"  Seed: {config.seed}")
    print()


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        config = BenchmarkConfig.from_args(args)
    except ValueError as e:
        print(f"❌ Invalid configuration: {e}")
        return 1

    print_config(config)

    # Фаза 1: создание файлов
    print("📝 Creating test files...")
    try:
        file_paths = create_test_files(config, Path(args.data_dir))
    except BenchmarkSetupError as e:
        print(f"❌ {e}")
        return 1
    print(f"✅ Created {len(file_paths)} files")

    try:
        # Фаза 2: ожидание
        print(f"⏳ Waiting {config.wait_time:g} seconds...")
        time.sleep(config.wait_time)

        # Фаза 3: замеры
        print("🔬 Running performance tests...")
        try:
            run = run_benchmark(config, file_paths)
        except BenchmarkSetupError as e:
            print(f"❌ {e}")
            return 1

        # Фаза 4: отчет
        print("\n📊 Performance Results:")
        collector = MetricsCollector(config)
        reports = collector.add_run(run)

        output_dir = Path(args.output_dir) if args.output_dir else None
        print(collector.generate_report(output_dir))

        if output_dir is not None:
            collector.save_raw_data(output_dir)
            if run.results:
                generate_all_plots(run, reports, output_dir)
            print(f"\nResults saved to: {output_dir.absolute()}")
    finally:
        if not args.keep_files:
            cleanup_test_files(file_paths)
            print("\n🧹 Cleaned up test files")

    return 0


if __name__ == '__main__':
    sys.exit(main())
