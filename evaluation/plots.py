"""
Figure helpers for the demo results.

Each function consumes already-computed results (no numerics here) and
returns a matplotlib Figure, optionally saved to disk. matplotlib is
imported inside each function so the numeric core never loads it.
"""

import numpy as np
from typing import Any, Optional, Tuple

from .metrics import ConfusionCounts, ROCCurve, ClassificationMetrics
from .inverse import ScoreHistogram


def _save(fig, save_path: Optional[str]):
    if save_path:
        fig.savefig(save_path, dpi=150, bbox_inches='tight')


def format_confusion_matrix(counts: ConfusionCounts,
                            title: str = "Confusion Matrix") -> str:
    """
    ASCII representation of a binary confusion matrix.

    Rows are actual classes, columns predicted classes.
    """
    cm = counts.as_matrix()
    names = ["Neg", "Pos"]
    val_width = max(len(str(int(np.max(cm)))), 4)
    label_width = max(len(name) for name in names)

    header = " " * (label_width + 8) + " ".join(f"{name:>{val_width}}" for name in names)
    lines = [title, "=" * len(header), " " * (label_width + 8) + "Predicted", header,
             "-" * len(header)]

    for i, row_name in enumerate(names):
        prefix = "Actual " if i == 0 else "       "
        row_vals = " ".join(f"{int(cm[i, j]):>{val_width}}" for j in range(2))
        lines.append(f"{prefix}{row_name:>{label_width}} {row_vals}")

    lines.append("=" * len(header))
    accuracy = (counts.tp + counts.tn) / counts.total if counts.total > 0 else 0
    lines.append(f"Accuracy: {accuracy:.4f} ({counts.tp + counts.tn}/{counts.total})")

    return "\n".join(lines)


def plot_confusion_matrix(counts: ConfusionCounts,
                          title: str = "Confusion Matrix",
                          cmap: str = 'Blues',
                          figsize: Tuple[int, int] = (6, 5),
                          save_path: Optional[str] = None) -> Any:
    """
    Plot a binary confusion matrix as a heatmap.

    Layout matches the demo page: predicted on x, actual on y,
    positive row on top.
    """
    import matplotlib.pyplot as plt

    grid = np.array([[counts.fn, counts.tp],
                     [counts.tn, counts.fp]])
    cell_names = [['FN', 'TP'], ['TN', 'FP']]

    fig, ax = plt.subplots(figsize=figsize)
    ax.imshow(grid, interpolation='nearest', cmap=cmap, vmin=0)

    ax.set(xticks=[0, 1], yticks=[0, 1],
           xticklabels=['Negative', 'Positive'],
           yticklabels=['Positive', 'Negative'],
           title=title, xlabel='Predicted label', ylabel='True label')

    max_val = grid.max() if grid.max() > 0 else 1
    for i in range(2):
        for j in range(2):
            val = grid[i, j]
            ax.text(j, i, f"{cell_names[i][j]}\n{int(val)}", ha="center", va="center",
                    color="white" if val / max_val > 0.5 else "black", fontsize=14)

    fig.tight_layout()
    _save(fig, save_path)
    return fig


def plot_roc_curve(roc: ROCCurve,
                   title: str = "ROC Curve",
                   figsize: Tuple[int, int] = (6, 6),
                   save_path: Optional[str] = None) -> Any:
    """Plot an ROC curve against the chance line."""
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize)

    ax.plot(roc.fpr, roc.tpr, color='#0D47A1', lw=3,
            label=f'ROC curve (AUC = {roc.auc:.4f})')
    ax.plot([0, 1], [0, 1], color='#666666', lw=1.5, linestyle='--',
            label='Chance line')

    ax.set_xlim([0.0, 1.0])
    ax.set_ylim([0.0, 1.05])
    ax.set_xlabel('False Positive Rate')
    ax.set_ylabel('True Positive Rate')
    ax.set_title(title)
    ax.legend(loc="lower right")
    ax.grid(True, alpha=0.3)

    fig.tight_layout()
    _save(fig, save_path)
    return fig


def plot_metrics(metrics: ClassificationMetrics,
                 title: str = "Metrics",
                 figsize: Tuple[int, int] = (8, 4),
                 save_path: Optional[str] = None) -> Any:
    """Bar chart of AUC, accuracy, precision, recall, specificity and F1."""
    import matplotlib.pyplot as plt

    values = metrics.as_dict()
    colors = ['#673AB7', '#009688', '#1E88E5', '#388E3C', '#FB8C00', '#9C27B0']

    fig, ax = plt.subplots(figsize=figsize)
    bars = ax.bar(list(values.keys()), list(values.values()),
                  color=colors[len(colors) - len(values):])
    for bar, val in zip(bars, values.values()):
        ax.text(bar.get_x() + bar.get_width() / 2, bar.get_height(), f"{val:.3f}",
                ha='center', va='bottom', fontsize=9)

    ax.set_ylim([0.0, 1.05])
    ax.set_title(title)
    fig.tight_layout()
    _save(fig, save_path)
    return fig


def plot_score_histogram(histogram: ScoreHistogram,
                         title: str = "Score Distribution",
                         figsize: Tuple[int, int] = (8, 4),
                         save_path: Optional[str] = None) -> Any:
    """Stacked per-class histogram of simulated scores."""
    import matplotlib.pyplot as plt

    x = np.arange(len(histogram.bin_labels))

    fig, ax = plt.subplots(figsize=figsize)
    ax.bar(x, histogram.negative, width=1.0, color='#0D47A1',
           label='Scores (Negative Class)')
    ax.bar(x, histogram.positive, width=1.0, bottom=histogram.negative,
           color='#B71C1C', label='Scores (Positive Class)')

    ax.set_xticks(x[::2])
    ax.set_xticklabels(histogram.bin_labels[::2])
    ax.set_ylabel('Number of Samples')
    ax.set_title(title)
    ax.legend()
    fig.tight_layout()
    _save(fig, save_path)
    return fig


def plot_regression(result, title: str = "Polynomial Regression",
                    figsize: Tuple[int, int] = (8, 6),
                    save_path: Optional[str] = None) -> Any:
    """
    Plot points, fitted curve, ±2σ band and residual segments.

    Args:
        result: playground.regression_demo.RegressionDemoResult
    """
    import matplotlib.pyplot as plt

    fig, ax = plt.subplots(figsize=figsize)
    ax.scatter(result.x, result.y, color='#1976d2', zorder=3, label='Points')

    if result.enough_data:
        ax.plot(result.curve_x, result.curve_y, color='#d32f2f', lw=2,
                label=f'Degree {result.degree} fit')
        ax.fill_between(result.curve_x, result.band.lower, result.band.upper,
                        color='#d32f2f', alpha=0.15, label='±2σ band')
        for x, y, y_hat in zip(result.x, result.y, result.y_pred):
            ax.plot([x, x], [y, y_hat], color='#888888', lw=1, linestyle=':')

    viewport = result.viewport
    ax.set_xlim(viewport.x_min, viewport.x_max)
    ax.set_ylim(viewport.y_min, viewport.y_max)
    ax.set_title(title)
    ax.legend(loc='upper left')
    ax.grid(True, alpha=0.3)
    fig.tight_layout()
    _save(fig, save_path)
    return fig


def plot_spectrum(result, title: str = "Fourier Transform",
                  figsize: Tuple[int, int] = (10, 8),
                  save_path: Optional[str] = None) -> Any:
    """
    Time-domain signal, magnitude spectrum and phase spectrum.

    Args:
        result: playground.fourier_demo.FourierDemoResult
    """
    import matplotlib.pyplot as plt

    fig, (ax_time, ax_mag, ax_phase) = plt.subplots(3, 1, figsize=figsize)

    ax_time.plot(result.signal.time, result.signal.samples, color='#1976d2', lw=1.5,
                 label='Composite Signal')
    for wave, samples in zip(result.signal.waves, result.signal.components):
        ax_time.plot(result.signal.time, samples, lw=1, linestyle='--',
                     label=f'{wave.frequency:g} Hz')
    ax_time.set_xlabel('Time (s)')
    ax_time.set_ylabel('Amplitude')
    ax_time.legend(loc='upper right', fontsize=8)

    shown = result.display_spectrum
    ax_mag.bar(shown.frequencies, shown.magnitude,
               width=result.metrics.freq_resolution * 0.8, color='#1976d2')
    ax_mag.set_xlabel('Frequency (Hz)')
    ax_mag.set_ylabel('|X(f)|')

    ax_phase.scatter(result.phase_points[0], result.phase_points[1], color='#388e3c')
    ax_phase.set_xlim(0, shown.frequencies[-1] if len(shown.frequencies) else 1)
    ax_phase.set_ylim(-180, 180)
    ax_phase.set_xlabel('Frequency (Hz)')
    ax_phase.set_ylabel('Phase (°)')

    fig.suptitle(title)
    fig.tight_layout()
    _save(fig, save_path)
    return fig
