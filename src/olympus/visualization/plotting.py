from __future__ import annotations
import csv
from typing import Dict, Tuple, List
import numpy as np
import matplotlib.pyplot as plt
from matplotlib.figure import Figure

from olympus.core.state import LUNAR_DISTANCE, SECONDS_PER_DAY


def load_report_csv(filepath: str) -> Tuple[np.ndarray, Dict[str, np.ndarray]]:
    """
    Load a CSV produced by CSVLogger.

    Returns
    -------
    t : (N,) array
        Time vector [s].
    cols : dict[str, np.ndarray]
        Mapping column_name -> (N,) array.
    """
    with open(filepath, "r", newline="") as f:
        reader = csv.reader(f)
        headers = next(reader)
    if headers[0] != "t":
        raise ValueError("First column must be time 't'.")
    data = np.loadtxt(filepath, delimiter=",", skiprows=1, dtype=float, ndmin=2)
    if data.shape[0] == 0:
        raise ValueError(f"No data rows in {filepath}.")
    cols: Dict[str, np.ndarray] = {}
    for j, name in enumerate(headers):
        cols[name] = data[:, j]
    return cols["t"], cols


def _require(cols: Dict[str, np.ndarray], names: List[str]) -> List[np.ndarray]:
    out = []
    for name in names:
        if name not in cols:
            raise KeyError(f"Column '{name}' not found in CSV.")
        out.append(cols[name])
    return out


def plot_fall_profile(
    csv_path: str,
    save_path: str | None = None,
    show: bool = False,
    lunar_units: bool = False,
) -> Figure:
    """
    Plot altitude and velocity against time in days.

    Parameters
    ----------
    csv_path : str
        Path to logger CSV (needs 'distance' and 'velocity' columns).
    save_path : str | None
        If given, save the figure to this path (png/svg).
    show : bool
        Whether to call plt.show().
    lunar_units : bool
        Plot altitude in lunar distances instead of kilometers.

    Returns
    -------
    fig : Figure
    """
    t, cols = load_report_csv(csv_path)
    distance, velocity = _require(cols, ["distance", "velocity"])
    days = t / SECONDS_PER_DAY

    fig, (ax_d, ax_v) = plt.subplots(2, 1, sharex=True, figsize=(10, 7))
    if lunar_units:
        ax_d.plot(days, distance / LUNAR_DISTANCE, lw=1.5)
        ax_d.set_ylabel("altitude [moon units]")
    else:
        ax_d.plot(days, distance / 1000.0, lw=1.5)
        ax_d.set_ylabel("altitude [km]")
    ax_d.grid(True, alpha=0.3)
    ax_d.set_title("Fall profile")

    ax_v.plot(days, velocity, lw=1.5, color="tab:red")
    ax_v.set_ylabel("velocity [m/s]")
    ax_v.set_xlabel("time [days]")
    ax_v.grid(True, alpha=0.3)

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150)
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig


def plot_accelerations(
    csv_path: str,
    save_path: str | None = None,
    show: bool = False,
) -> Figure:
    """Gravity and drag accelerations against time, log scale when positive."""
    t, cols = load_report_csv(csv_path)
    a_g, a_d = _require(cols, ["gravity_acceleration", "drag_acceleration"])
    days = t / SECONDS_PER_DAY

    fig, ax = plt.subplots(figsize=(10, 5))
    ax.plot(days, a_g, lw=1.5, label="gravity")
    ax.plot(days, a_d, lw=1.5, label="drag")
    if np.all(a_g > 0):
        ax.set_yscale("symlog", linthresh=1e-3)
    ax.set_xlabel("time [days]")
    ax.set_ylabel("acceleration [m/s²]")
    ax.grid(True, alpha=0.3)
    ax.legend()

    fig.tight_layout()
    if save_path:
        fig.savefig(save_path, dpi=150)
    if show:
        plt.show()
    else:
        plt.close(fig)
    return fig
