"""
Polynomial regression playground.

Points are owned by a versioned PointCollection and edited only through
commands (add / move / remove / clear / viewport changes). Every command
bumps the version; RegressionPlayground refits after each one and hands
back an immutable RegressionDemoResult for the charts.
"""

import numpy as np
from typing import List, Optional, Tuple
from dataclasses import dataclass

import config
from ml_from_scratch.random_gaussian import random_gaussian
from ml_from_scratch.polynomial_regression import (
    ConfidenceBand,
    RegressionStatistics,
    confidence_band,
    fit_polynomial,
    predict_polynomial,
    regression_statistics,
)


@dataclass(frozen=True)
class Point:
    id: int
    x: float
    y: float


@dataclass(frozen=True)
class Viewport:
    x_min: float = config.X_MIN
    x_max: float = config.X_MAX
    y_min: float = config.Y_MIN
    y_max: float = config.Y_MAX

    def __post_init__(self):
        if self.x_min >= self.x_max or self.y_min >= self.y_max:
            raise ValueError(f"Empty viewport: {self}")

    def clamp(self, x: float, y: float) -> Tuple[float, float]:
        return (min(max(x, self.x_min), self.x_max),
                min(max(y, self.y_min), self.y_max))

    def zoomed(self, factor: float, center_x: float, center_y: float) -> 'Viewport':
        """Scale both ranges by factor, keeping (center_x, center_y) fixed on screen."""
        if factor <= 0:
            raise ValueError(f"zoom factor must be positive, got {factor}")

        x_range = self.x_max - self.x_min
        y_range = self.y_max - self.y_min
        x_ratio = (center_x - self.x_min) / x_range
        y_ratio = (center_y - self.y_min) / y_range

        return Viewport(
            x_min=center_x - x_range * factor * x_ratio,
            x_max=center_x + x_range * factor * (1 - x_ratio),
            y_min=center_y - y_range * factor * y_ratio,
            y_max=center_y + y_range * factor * (1 - y_ratio),
        )


class PointCollection:
    """
    Editable set of regression points.

    Points added or moved are clamped to the current viewport. The
    version counter increases by one on every successful command.
    """

    def __init__(self, viewport: Optional[Viewport] = None):
        self.viewport = viewport or Viewport()
        self._points: List[Point] = []
        self._next_id = 0
        self.version = 0

    def __len__(self) -> int:
        return len(self._points)

    @property
    def points(self) -> Tuple[Point, ...]:
        return tuple(self._points)

    def arrays(self) -> Tuple[np.ndarray, np.ndarray]:
        x = np.array([p.x for p in self._points], dtype=np.float64)
        y = np.array([p.y for p in self._points], dtype=np.float64)
        return x, y

    def _touch(self) -> int:
        self.version += 1
        return self.version

    def add_point(self, x: float, y: float) -> int:
        """Add a point (clamped to the viewport); returns its id."""
        x, y = self.viewport.clamp(x, y)
        point = Point(self._next_id, x, y)
        self._next_id += 1
        self._points.append(point)
        self._touch()
        return point.id

    def move_point(self, point_id: int, x: float, y: float) -> bool:
        for i, point in enumerate(self._points):
            if point.id == point_id:
                x, y = self.viewport.clamp(x, y)
                self._points[i] = Point(point_id, x, y)
                self._touch()
                return True
        return False

    def remove_point(self, point_id: int) -> bool:
        remaining = [p for p in self._points if p.id != point_id]
        if len(remaining) == len(self._points):
            return False
        self._points = remaining
        self._touch()
        return True

    def clear(self) -> None:
        self._points = []
        self._touch()

    def find_nearest(self, x: float, y: float,
                     threshold: float = config.NEAREST_POINT_THRESHOLD) -> Optional[Point]:
        """First point within `threshold` of (x, y), for picking a drag target."""
        for point in self._points:
            if np.hypot(point.x - x, point.y - y) < threshold:
                return point
        return None

    def add_random_points(self, count: int, noise_std: float = 2.0) -> List[int]:
        """Scatter `count` points uniformly across the viewport with Gaussian y jitter."""
        vp = self.viewport
        ids = []
        for _ in range(count):
            x = vp.x_min + np.random.random() * (vp.x_max - vp.x_min)
            y = vp.y_min + np.random.random() * (vp.y_max - vp.y_min) + random_gaussian(0, noise_std)
            ids.append(self.add_point(x, y))
        return ids

    def set_viewport(self, viewport: Viewport) -> None:
        self.viewport = viewport
        self._touch()

    def zoom(self, factor: float, center_x: float, center_y: float) -> None:
        self.set_viewport(self.viewport.zoomed(factor, center_x, center_y))

    def zoom_step(self, zoom_in: bool, center_x: float, center_y: float) -> None:
        """One mouse-wheel notch: shrink (zoom in) or grow the view by ZOOM_FACTOR."""
        factor = 1 - config.ZOOM_FACTOR if zoom_in else 1 + config.ZOOM_FACTOR
        self.zoom(factor, center_x, center_y)

    def reset_viewport(self) -> None:
        """
        Default view when empty; otherwise fit all points with padding of
        10% of the data range (at least 1 unit) on each side.
        """
        if not self._points:
            self.set_viewport(Viewport())
            return

        x, y = self.arrays()
        x_pad = max((x.max() - x.min()) * config.VIEWPORT_PADDING_RATIO, config.VIEWPORT_MIN_PADDING)
        y_pad = max((y.max() - y.min()) * config.VIEWPORT_PADDING_RATIO, config.VIEWPORT_MIN_PADDING)
        self.set_viewport(Viewport(x.min() - x_pad, x.max() + x_pad,
                                   y.min() - y_pad, y.max() + y_pad))


@dataclass(frozen=True)
class RegressionDemoResult:
    """
    Fit output for one version of the point collection.

    When enough_data is False, coefficients is None, the curve, band and
    residuals are empty and statistics are all zero.
    """
    version: int
    degree: int
    viewport: Viewport
    x: np.ndarray
    y: np.ndarray
    enough_data: bool
    coefficients: Optional[np.ndarray]
    y_pred: np.ndarray
    statistics: RegressionStatistics
    curve_x: np.ndarray
    curve_y: np.ndarray
    band: ConfidenceBand

    @property
    def residual_points(self) -> List[Tuple[float, float]]:
        """(predicted, residual) pairs for the residual plot."""
        return [(float(p), float(r)) for p, r in zip(self.y_pred, self.statistics.residuals)]


def curve_grid(viewport: Viewport, step: float = config.CURVE_STEP) -> np.ndarray:
    """x positions from x_min to x_max (inclusive when it lands on the grid)."""
    n = int(np.floor((viewport.x_max - viewport.x_min) / step + 1e-9)) + 1
    return viewport.x_min + step * np.arange(n)


def run_regression_demo(collection: PointCollection, degree: int = config.DEFAULT_DEGREE,
                        confidence_multiplier: float = config.CONFIDENCE_MULTIPLIER,
                        curve_step: float = config.CURVE_STEP) -> RegressionDemoResult:
    """Fit the current points and sample the curve across the viewport."""
    low, high = config.DEGREE_RANGE
    if not low <= degree <= high:
        raise ValueError(f"degree must be in [{low}, {high}], got {degree}")

    x, y = collection.arrays()
    viewport = collection.viewport
    n = len(x)

    coefficients = fit_polynomial(x, y, degree)
    empty = np.array([], dtype=np.float64)

    if coefficients is None:
        return RegressionDemoResult(
            version=collection.version,
            degree=degree,
            viewport=viewport,
            x=x,
            y=y,
            enough_data=False,
            coefficients=None,
            y_pred=empty,
            statistics=RegressionStatistics(0.0, 0.0, 0.0, 0.0, 0.0, empty),
            curve_x=empty,
            curve_y=empty,
            band=ConfidenceBand(lower=empty, upper=empty),
        )

    y_pred = predict_polynomial(x, coefficients)
    stats = regression_statistics(y, y_pred, n, degree)

    curve_x = curve_grid(viewport, curve_step)
    return RegressionDemoResult(
        version=collection.version,
        degree=degree,
        viewport=viewport,
        x=x,
        y=y,
        enough_data=True,
        coefficients=coefficients,
        y_pred=y_pred,
        statistics=stats,
        curve_x=curve_x,
        curve_y=predict_polynomial(curve_x, coefficients),
        band=confidence_band(curve_x, coefficients, stats.residuals, confidence_multiplier),
    )


class RegressionPlayground:
    """
    Command front-end: each command edits the collection and returns a
    freshly computed result.
    """

    def __init__(self, degree: int = config.DEFAULT_DEGREE,
                 collection: Optional[PointCollection] = None):
        self.collection = collection or PointCollection()
        self.degree = degree

    @classmethod
    def with_initial_points(cls, n_points: int = config.INITIAL_POINTS,
                            degree: int = config.DEFAULT_DEGREE) -> 'RegressionPlayground':
        """Seed with points scattered around y = 2 + 0.5 x."""
        playground = cls(degree=degree)
        vp = playground.collection.viewport
        for _ in range(n_points):
            x = vp.x_min + np.random.random() * (vp.x_max - vp.x_min)
            playground.collection.add_point(x, 2 + 0.5 * x + random_gaussian(0, 1.5))
        return playground

    def result(self) -> RegressionDemoResult:
        return run_regression_demo(self.collection, self.degree)

    def set_degree(self, degree: int) -> RegressionDemoResult:
        low, high = config.DEGREE_RANGE
        if not low <= degree <= high:
            raise ValueError(f"degree must be in [{low}, {high}], got {degree}")
        self.degree = degree
        return self.result()

    def add_point(self, x: float, y: float) -> RegressionDemoResult:
        self.collection.add_point(x, y)
        return self.result()

    def move_point(self, point_id: int, x: float, y: float) -> RegressionDemoResult:
        self.collection.move_point(point_id, x, y)
        return self.result()

    def remove_point(self, point_id: int) -> RegressionDemoResult:
        self.collection.remove_point(point_id)
        return self.result()

    def clear(self) -> RegressionDemoResult:
        self.collection.clear()
        return self.result()

    def set_viewport(self, viewport: Viewport) -> RegressionDemoResult:
        self.collection.set_viewport(viewport)
        return self.result()

    def zoom(self, factor: float, center_x: float, center_y: float) -> RegressionDemoResult:
        self.collection.zoom(factor, center_x, center_y)
        return self.result()

    def reset_viewport(self) -> RegressionDemoResult:
        self.collection.reset_viewport()
        return self.result()
