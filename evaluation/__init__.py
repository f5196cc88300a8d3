"""
Evaluation module for the statistics demos.

Provides the classification metrics behind the classifier pages:
- Confusion counts and derived rates: accuracy, precision, recall,
  specificity, F1
- ROC curve and AUC by threshold sweep
- Inverse mode: score simulation from counts, total-preserving edits,
  score histogram
- Visualization: confusion matrix, ROC, metrics, regression and spectrum
  figures (matplotlib)

All metrics are implemented from scratch using only NumPy.
"""

from .metrics import (
    # Confusion matrix
    ConfusionCounts,
    confusion_counts,

    # Derived rates
    ClassificationMetrics,
    classification_metrics,

    # ROC-AUC
    ROCCurve,
    chance_line,
    roc_curve,
    roc_auc_score,
    evaluate_scores,
)

from .inverse import (
    simulate_scores_from_counts,
    adjust_counts_to_total,
    ScoreHistogram,
    score_histogram,
)

from .plots import (
    format_confusion_matrix,
    plot_confusion_matrix,
    plot_roc_curve,
    plot_metrics,
    plot_score_histogram,
    plot_regression,
    plot_spectrum,
)

__all__ = [
    # Confusion matrix
    'ConfusionCounts',
    'confusion_counts',

    # Derived rates
    'ClassificationMetrics',
    'classification_metrics',

    # ROC-AUC
    'ROCCurve',
    'chance_line',
    'roc_curve',
    'roc_auc_score',
    'evaluate_scores',

    # Inverse mode
    'simulate_scores_from_counts',
    'adjust_counts_to_total',
    'ScoreHistogram',
    'score_histogram',

    # Visualization
    'format_confusion_matrix',
    'plot_confusion_matrix',
    'plot_roc_curve',
    'plot_metrics',
    'plot_score_histogram',
    'plot_regression',
    'plot_spectrum',
]
