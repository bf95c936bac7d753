"""Plots of fit quality for prediction results."""

import matplotlib.pyplot as plt
import numpy as np
from matplotlib.axes import Axes
from pathlib import Path
from typing import Optional, Union

from .evaluation import PredictionResult


def plot_predictions(
    result: PredictionResult,
    ax: Optional[Axes] = None,
    title: Optional[str] = None,
) -> Axes:
    """
    Scatter observed against predicted values with a least-squares reference line.

    Args:
        result: `PredictionResult` to plot
        ax: Axes to draw on. Default: a new figure.
        title: Optional plot title

    Returns:
        The Axes drawn on
    """
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(6, 5))

    ax.scatter(result.observed, result.predicted, alpha=0.6)

    # Reference line fitted through the scatter
    if len(result) >= 2 and np.ptp(result.observed) > 0:
        slope, intercept = np.polyfit(result.observed, result.predicted, deg=1)
        xs = np.linspace(result.observed.min(), result.observed.max(), 100)
        ax.plot(xs, slope * xs + intercept, color="C1")

    ax.set_xlabel("Observed")
    ax.set_ylabel("Predicted")
    if title is not None:
        ax.set_title(title)
    return ax


def plot_residuals(
    result: PredictionResult,
    ax: Optional[Axes] = None,
    title: Optional[str] = None,
) -> Axes:
    """
    Scatter residuals against the predictor with a zero line.

    Records are plotted against their index if no predictor values were supplied.
    """
    if ax is None:
        _, ax = plt.subplots(1, 1, figsize=(6, 4))

    if np.all(np.isnan(result.predictor)):
        x = np.arange(len(result))
        ax.set_xlabel("Record")
    else:
        x = result.predictor
        ax.set_xlabel("Predictor")

    ax.scatter(x, result.residual, alpha=0.6)
    ax.axhline(0.0, color="C1", linestyle="--")
    ax.set_ylabel("Residual")
    if title is not None:
        ax.set_title(title)
    return ax


def save_fig(ax_or_fig: Union[Axes, plt.Figure], path: Union[str, Path]) -> Path:
    """Save an Axes' figure (or a Figure) to `path` with tight layout. Returns the path."""
    out_path = Path(path)
    out_path.parent.mkdir(parents=True, exist_ok=True)
    fig = ax_or_fig if isinstance(ax_or_fig, plt.Figure) else ax_or_fig.get_figure()
    fig.tight_layout()
    fig.savefig(out_path, dpi=150)
    return out_path
