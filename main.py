#!/usr/bin/env python3
"""
School of Statistics - Main Entry Point

Runs the numeric side of the four teaching demos and prints their results.

Usage:
    python main.py                                  # Run all demos
    python main.py --demo classifier --separation 6 --std-dev 1
    python main.py --demo inverse --set tp=100 --lock fn
    python main.py --demo regression --degree 3 --points 20
    python main.py --demo fourier --num-samples 200 --noise 0.5
    python main.py --save-plots results/plots       # Also write PNG figures
"""

import argparse
import os
import sys

import numpy as np

# Add project root to path
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

import config
from evaluation import (
    format_confusion_matrix,
    plot_confusion_matrix,
    plot_roc_curve,
    plot_metrics,
    plot_score_histogram,
    plot_regression,
    plot_spectrum,
)
from playground import (
    ClassifierDemoState,
    FourierDemoState,
    InverseDemoState,
    RegressionPlayground,
    run_classifier_demo,
    run_fourier_demo,
    run_inverse_demo,
)

DEMOS = ['classifier', 'inverse', 'regression', 'fourier']


def _banner(title: str):
    print("\n" + "=" * 70)
    print(title)
    print("=" * 70)


def _print_metrics(metrics):
    for name, value in metrics.as_dict().items():
        print(f"  {name:<12} {value:.4f}")


def _plot_path(plot_dir, name):
    return os.path.join(plot_dir, name) if plot_dir else None


def demo_classifier(args, plot_dir=None):
    """Gaussian Naive Bayes on two generated clouds."""
    _banner("DIRECT CLASSIFIER (Gaussian Naive Bayes)")

    state = ClassifierDemoState(separation=args.separation, std_dev=args.std_dev,
                                n_per_class=args.n_per_class)
    result = run_classifier_demo(state, verbose=True)

    for cls, params in result.model_params.items():
        print(f"  class {cls}: prior={params['prior']:.3f} "
              f"mean=({params['mean'][0]:.3f}, {params['mean'][1]:.3f}) "
              f"var=({params['variance'][0]:.3f}, {params['variance'][1]:.3f})")
    print()
    print(format_confusion_matrix(result.counts))
    print()
    _print_metrics(result.metrics)

    if plot_dir:
        plot_roc_curve(result.roc, save_path=_plot_path(plot_dir, "classifier_roc.png"))
        plot_confusion_matrix(result.counts,
                              save_path=_plot_path(plot_dir, "classifier_confusion.png"))
        plot_metrics(result.metrics, save_path=_plot_path(plot_dir, "classifier_metrics.png"))


def demo_inverse(args, plot_dir=None):
    """Edit confusion counts under a fixed total, then simulate scores."""
    _banner("INVERSE CLASSIFIER (confusion matrix -> scores)")

    state = InverseDemoState()
    for name in args.lock:
        state = state.toggle_lock(name)

    for edit in args.set:
        name, _, value = edit.partition('=')
        state = state.set_count(name.strip(), int(value))
        status = "applied" if state.last_edit_accepted else "rejected (total cannot be kept)"
        print(f"  set {name.strip()}={value}: {status}")

    result = run_inverse_demo(state, verbose=True)
    print()
    print(format_confusion_matrix(result.counts))
    print()
    _print_metrics(result.metrics)

    if plot_dir:
        plot_score_histogram(result.histogram, save_path=_plot_path(plot_dir, "inverse_scores.png"))
        plot_roc_curve(result.roc, save_path=_plot_path(plot_dir, "inverse_roc.png"))
        plot_metrics(result.metrics, save_path=_plot_path(plot_dir, "inverse_metrics.png"))


def demo_regression(args, plot_dir=None):
    """Least-squares polynomial fit on random points."""
    _banner(f"POLYNOMIAL REGRESSION (degree {args.degree})")

    playground = RegressionPlayground.with_initial_points(args.points, degree=args.degree)
    result = playground.result()

    print(f"  points: {len(result.x)} (collection version {result.version})")
    if not result.enough_data:
        print(f"  Not enough data: need at least {args.degree + 1} points")
        return

    coefs = ", ".join(f"{c:.4f}" for c in result.coefficients)
    print(f"  coefficients [b0..b{args.degree}]: {coefs}")
    for name, value in result.statistics.as_dict().items():
        print(f"  {name:<12} {value:.4f}")

    if plot_dir:
        plot_regression(result, save_path=_plot_path(plot_dir, "regression.png"))


def demo_fourier(args, plot_dir=None):
    """Composite sine signal and its single-sided spectrum."""
    _banner("FOURIER TRANSFORM")

    state = FourierDemoState(num_samples=args.num_samples,
                             add_noise=args.noise is not None,
                             noise_level=args.noise if args.noise is not None else 0.0)
    result = run_fourier_demo(state, verbose=True)

    m = result.metrics
    print(f"  Sampling rate:        {m.sampling_rate:g} Hz")
    print(f"  Nyquist frequency:    {m.nyquist:g} Hz")
    print(f"  Frequency resolution: {m.freq_resolution:.3f} Hz")
    print(f"  Duration:             {m.duration:.3f} s")
    print(f"  Total power:          {m.total_power:.3f}")
    print(f"  RMS amplitude:        {m.rms_amplitude:.3f}")

    if plot_dir:
        plot_spectrum(result, save_path=_plot_path(plot_dir, "fourier.png"))


def main():
    defaults = config.get_default_config()

    parser = argparse.ArgumentParser(description="School of Statistics numeric demos")
    parser.add_argument("--demo", choices=DEMOS + ['all'], default='all',
                        help="Which demo to run (default: all)")
    parser.add_argument("--seed", type=int, default=None,
                        help="Seed NumPy's global generator for repeatable output")
    parser.add_argument("--save-plots", metavar="DIR", nargs='?', const=config.PLOTS_DIR,
                        default=None,
                        help=f"Write PNG figures to DIR (default: {config.PLOTS_DIR})")

    clf = parser.add_argument_group("classifier")
    clf.add_argument("--separation", type=float, default=defaults['classifier'].separation)
    clf.add_argument("--std-dev", type=float, default=defaults['classifier'].std_dev)
    clf.add_argument("--n-per-class", type=int, default=defaults['classifier'].n_per_class)

    inv = parser.add_argument_group("inverse")
    inv.add_argument("--set", action="append", default=[], metavar="FIELD=VALUE",
                     help="Edit a count (tp, fp, tn, fn); may be repeated")
    inv.add_argument("--lock", action="append", default=[], choices=config.COUNT_FIELDS,
                     help="Lock a count before editing; may be repeated")

    reg = parser.add_argument_group("regression")
    reg.add_argument("--degree", type=int, default=defaults['regression'].degree)
    reg.add_argument("--points", type=int, default=defaults['regression'].initial_points)

    fou = parser.add_argument_group("fourier")
    fou.add_argument("--num-samples", type=int, default=defaults['spectrum'].num_samples)
    fou.add_argument("--noise", type=float, default=None,
                     help="Add Gaussian noise with this standard deviation")

    args = parser.parse_args()

    if args.seed is not None:
        np.random.seed(args.seed)

    plot_dir = args.save_plots
    if plot_dir:
        import matplotlib
        matplotlib.use("Agg")
        os.makedirs(plot_dir, exist_ok=True)

    runners = {
        'classifier': demo_classifier,
        'inverse': demo_inverse,
        'regression': demo_regression,
        'fourier': demo_fourier,
    }
    selected = DEMOS if args.demo == 'all' else [args.demo]

    try:
        for name in selected:
            runners[name](args, plot_dir)
    except ValueError as e:
        print(f"Error: {e}")
        return 1

    if plot_dir:
        print(f"\nFigures written to {plot_dir}/")
    return 0


if __name__ == "__main__":
    sys.exit(main())
