"""Сбор и обработка метрик"""

import json
import logging
from dataclasses import dataclass, asdict
from datetime import datetime
from pathlib import Path
from typing import Dict, List, Optional, Sequence

import numpy as np

from .base import ReadResult, RunResult
from .workloads import BenchmarkConfig

logger = logging.getLogger(__name__)

PERCENTILES = (0.90, 0.95, 0.99)

REPORT_TITLES = {
    "all": "📈 All Reads",
    "first": "🆕 First Reads",
    "repeated": "🔄 Repeated Reads",
}


@dataclass(frozen=True)
class LatencyStatistics:
    """Сводка по выборке задержек (в единицах выборки, обычно нс)"""
    count: int
    avg: float
    median: float
    p90: float
    p95: float
    p99: float
    min: float
    max: float

    @classmethod
    def zero(cls) -> "LatencyStatistics":
        return cls(count=0, avg=0, median=0, p90=0, p95=0, p99=0, min=0, max=0)

    def to_dict(self):
        return asdict(self)


def calculate_statistics(latencies: Sequence[float]) -> LatencyStatistics:
    """
    Статистика по выборке.

    Медиана - элемент с индексом count // 2 (верхняя медиана при четном
    count), перцентиль k - элемент с индексом int(count * k) в
    отсортированной выборке, без интерполяции.
    """
    if len(latencies) == 0:
        return LatencyStatistics.zero()

    sorted_latencies = np.sort(np.asarray(latencies))
    count = len(sorted_latencies)

    p90, p95, p99 = (sorted_latencies[int(count * k)].item() for k in PERCENTILES)

    return LatencyStatistics(
        count=count,
        avg=float(np.mean(sorted_latencies)),
        median=sorted_latencies[count // 2].item(),
        p90=p90,
        p95=p95,
        p99=p99,
        min=sorted_latencies[0].item(),
        max=sorted_latencies[-1].item(),
    )


def analyze_results(results: Sequence[ReadResult]) -> Dict[str, LatencyStatistics]:
    """
    Три отчета: все чтения, первые и повторные.
    Отчеты по пустым подмножествам не включаются.
    """
    first = [r.latency_ns for r in results if r.is_first_read]
    repeated = [r.latency_ns for r in results if not r.is_first_read]

    reports = {"all": calculate_statistics([r.latency_ns for r in results])}
    if first:
        reports["first"] = calculate_statistics(first)
    if repeated:
        reports["repeated"] = calculate_statistics(repeated)
    return reports


def format_statistics(stats: LatencyStatistics) -> List[str]:
    """Строки отчета в микросекундах"""
    us = 1000.0
    return [
        f"  Count:     {stats.count}",
        f"  Average:   {stats.avg / us:.2f}μs",
        f"  Median:    {stats.median / us:.2f}μs",
        f"  90th %ile: {stats.p90 / us:.2f}μs",
        f"  95th %ile: {stats.p95 / us:.2f}μs",
        f"  99th %ile: {stats.p99 / us:.2f}μs",
        f"  Min:       {stats.min / us:.2f}μs",
        f"  Max:       {stats.max / us:.2f}μs",
    ]


class MetricsCollector:
    """Сборщик метрик по запускам"""

    def __init__(self, config: BenchmarkConfig):
        self.config = config
        self.runs: List[RunResult] = []
        self.reports: List[Dict[str, LatencyStatistics]] = []
        self.timestamp = datetime.now().strftime("%Y%m%d_%H%M%S")

    def add_run(self, run: RunResult) -> Dict[str, LatencyStatistics]:
        """Добавить результат запуска и посчитать по нему отчеты"""
        reports = analyze_results(run.results)
        self.runs.append(run)
        self.reports.append(reports)
        return reports

    def save_raw_data(self, output_dir: Path) -> Path:
        """Сохранить сводные данные в JSON"""
        output_dir = Path(output_dir)
        output_dir.mkdir(parents=True, exist_ok=True)

        data = {
            'timestamp': self.timestamp,
            'config': self.config.to_dict(),
            'runs': [
                {
                    'mode': run.mode,
                    'errors': run.errors,
                    'shares': run.shares,
                    'total_time_sec': run.total_time_sec,
                    'reports': {name: stats.to_dict() for name, stats in reports.items()},
                }
                for run, reports in zip(self.runs, self.reports)
            ]
        }

        output_file = output_dir / f"iobench_raw_{self.timestamp}.json"
        with open(output_file, 'w', encoding='utf-8') as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

        logger.info("Raw data saved: %s", output_file)
        return output_file

    def generate_report(self, output_dir: Optional[Path] = None) -> str:
        """Генерация текстового отчета; сохраняется, если задан output_dir"""
        report_lines = []

        for run, reports in zip(self.runs, self.reports):
            if not run.results:
                report_lines.append("❌ No results to analyze")
                continue

            for name, stats in reports.items():
                report_lines.append("")
                report_lines.append(f"{REPORT_TITLES[name]} ({stats.count} operations):")
                report_lines.extend(format_statistics(stats))

            if run.errors:
                report_lines.append("")
                report_lines.append(f"⚠️  Dropped operations: {run.errors}")

        report_text = "\n".join(report_lines)

        if output_dir is not None:
            output_dir = Path(output_dir)
            output_dir.mkdir(parents=True, exist_ok=True)
            report_file = output_dir / f"iobench_report_{self.timestamp}.txt"
            with open(report_file, 'w', encoding='utf-8') as f:
                f.write(report_text)
            logger.info("Report saved: %s", report_file)

        return report_text
