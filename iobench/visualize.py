"""Визуализация результатов бенчмарка"""

from pathlib import Path
from typing import Dict, List

import numpy as np
import matplotlib.pyplot as plt

from .base import RunResult
from .metrics import LatencyStatistics

COLORS = {'all': '#95a5a6', 'first': '#e74c3c', 'repeated': '#2ecc71'}


def generate_all_plots(run: RunResult, reports: Dict[str, LatencyStatistics],
                       output_dir: Path) -> List[Path]:
    """Генерация всех графиков"""
    output_dir = Path(output_dir)
    output_dir.mkdir(parents=True, exist_ok=True)

    print("\n📊 Generating plots...")

    paths = [
        plot_latency_percentiles(reports, output_dir / "01_latency_percentiles.png", run.mode),
        plot_latency_distribution(run, output_dir / "02_latency_distribution.png"),
    ]

    print(f"✅ All plots saved to {output_dir}/")
    return paths


def plot_latency_percentiles(reports: Dict[str, LatencyStatistics], output_path: Path,
                             mode: str = "") -> Path:
    """Сравнение avg/median/перцентилей по подмножествам чтений"""
    metrics = ['avg', 'median', 'p90', 'p95', 'p99']
    subsets = list(reports.keys())

    fig, ax = plt.subplots(figsize=(12, 7))

    x = np.arange(len(metrics))
    width = 0.25

    for i, subset in enumerate(subsets):
        stats = reports[subset]
        values = [getattr(stats, m) / 1000.0 for m in metrics]  # нс -> мкс
        offset = width * (i - len(subsets)/2 + 0.5)
        bars = ax.bar(x + offset, values, width,
                      label=f"{subset} ({stats.count})",
                      color=COLORS.get(subset, '#3498db'))

        for bar in bars:
            height = bar.get_height()
            if height > 0:
                ax.text(bar.get_x() + bar.get_width()/2., height,
                        f'{height:.1f}',
                        ha='center', va='bottom', fontsize=9)

    ax.set_xlabel('Metric', fontsize=12, fontweight='bold')
    ax.set_ylabel('Latency (μs)', fontsize=12, fontweight='bold')
    ax.set_title(f'Read Latency Percentiles {mode}'.strip(),
                 fontsize=14, fontweight='bold', pad=20)
    ax.set_xticks(x)
    ax.set_xticklabels(metrics, fontsize=11)
    ax.legend(fontsize=11)
    ax.grid(axis='y', alpha=0.3, linestyle='--')

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"  ✓ {output_path.name}")
    return output_path


def plot_latency_distribution(run: RunResult, output_path: Path) -> Path:
    """Гистограмма задержек первых и повторных чтений"""
    first = np.array([r.latency_ns for r in run.first_reads()], dtype=float) / 1000.0
    repeated = np.array([r.latency_ns for r in run.repeated_reads()], dtype=float) / 1000.0

    fig, ax = plt.subplots(figsize=(12, 7))

    combined = np.concatenate([first, repeated])
    if combined.size:
        bins = np.linspace(combined.min(), combined.max() + 1e-9, 50)
        if first.size:
            ax.hist(first, bins=bins, alpha=0.6, label=f'first ({first.size})',
                    color=COLORS['first'])
        if repeated.size:
            ax.hist(repeated, bins=bins, alpha=0.6, label=f'repeated ({repeated.size})',
                    color=COLORS['repeated'])
        ax.legend(fontsize=11)

    ax.set_xlabel('Latency (μs)', fontsize=12, fontweight='bold')
    ax.set_ylabel('Operations', fontsize=12, fontweight='bold')
    ax.set_title(f'Latency Distribution ({run.mode})',
                 fontsize=14, fontweight='bold', pad=20)
    ax.grid(axis='y', alpha=0.3, linestyle='--')

    plt.tight_layout()
    plt.savefig(output_path, dpi=150, bbox_inches='tight')
    plt.close()
    print(f"  ✓ {output_path.name}")
    return output_path
