from __future__ import annotations

from typing import Optional

import numpy as np
import matplotlib.pyplot as plt

from catenaryline.model.catenary import SampleSet


def plot_profile(sample_set: SampleSet, title: Optional[str] = None, show: bool = True) -> plt.Figure:
    """
    Plot a sampled span as a side view (distance along the span vs. height),
    together with its straight chord.

    Args:
        sample_set: The sampled curve.
        title: Figure title; defaults to the strategy and sag.
        show: Call `plt.show()` before returning.

    Returns:
        The figure.
    """
    points = sample_set.points
    offsets = np.linalg.norm(points[:, :2] - points[0, :2], axis=1)
    heights = points[:, 2]

    plt.rcParams["figure.constrained_layout.use"] = True
    fig = plt.figure(figsize=(7, 5))

    plt.plot(offsets, heights, 'r', lw=2, label="Cable")
    plt.plot(offsets[[0, -1]], heights[[0, -1]], 'k--', lw=1, label="Chord")

    plt.grid(visible=True, which='major', axis='both', linestyle='-', color='gray', lw=0.5)
    plt.minorticks_on()
    plt.grid(visible=True, which='minor', axis='both', linestyle=':', color='gray', lw=0.5)

    meta = sample_set.metadata
    if title is None:
        title = "Degenerate span" if meta is None else f"{meta.strategy.value.capitalize()}: sag {meta.max_sag:.2f} m"
    plt.title(title)
    plt.xlabel("Distance along span (m)")
    plt.ylabel("Height (m)")
    plt.legend()

    if show:
        plt.show()
    return fig
