"""
Demo pipelines for the four statistics pages.

Each page keeps its parameters in an explicit state object and gets back an
immutable result from a pure run_* function:
- classifier_demo: Gaussian clouds -> Naive Bayes -> ROC / confusion metrics
- inverse_demo: confusion counts -> simulated scores -> ROC / histogram
- regression_demo: editable points -> polynomial fit -> curve / band / stats
- fourier_demo: sine components -> spectrum -> spectral metrics
"""

from .classifier_demo import ClassifierDemoState, ClassifierDemoResult, run_classifier_demo
from .inverse_demo import InverseDemoState, InverseDemoResult, run_inverse_demo
from .regression_demo import (
    Point,
    Viewport,
    PointCollection,
    RegressionDemoResult,
    RegressionPlayground,
    run_regression_demo,
)
from .fourier_demo import FourierDemoState, FourierDemoResult, run_fourier_demo

__all__ = [
    'ClassifierDemoState',
    'ClassifierDemoResult',
    'run_classifier_demo',
    'InverseDemoState',
    'InverseDemoResult',
    'run_inverse_demo',
    'Point',
    'Viewport',
    'PointCollection',
    'RegressionDemoResult',
    'RegressionPlayground',
    'run_regression_demo',
    'FourierDemoState',
    'FourierDemoResult',
    'run_fourier_demo',
]
