"""
Tests for the visualization module.
"""
import matplotlib
matplotlib.use("Agg")  # Non-interactive backend for testing

import numpy as np
import pandas as pd
import pytest
from matplotlib.figure import Figure

from olympus.core.state import ReportRecord
from olympus.logger import CSVLogger
from olympus.visualization.plotting import (
    load_report_csv,
    plot_accelerations,
    plot_fall_profile,
)


@pytest.fixture
def report_csv(tmp_path):
    """A CSVLogger file with a plausible fall."""
    fn = tmp_path / "reports.csv"
    with CSVLogger(fn) as logger:
        for t in np.linspace(0.0, 86_400.0, 50):
            logger.log(ReportRecord(
                elapsed_time=float(t),
                velocity=float(t) * 0.01,
                distance=5.7e8 - float(t) * 1000.0,
                gravity_acceleration=1e-3 + float(t) * 1e-6,
                drag_acceleration=0.0,
                enclosed_mass=5.97e24,
                density=0.0,
            ))
    return str(fn)


def test_load_report_csv(report_csv):
    t, cols = load_report_csv(report_csv)
    assert t.shape == (50,)
    assert cols["distance"][0] == 5.7e8
    assert set(cols) >= {"t", "velocity", "distance", "density"}


def test_load_requires_time_column(tmp_path):
    fn = tmp_path / "bad.csv"
    pd.DataFrame({"x": [1, 2], "distance": [3, 4]}).to_csv(fn, index=False)
    with pytest.raises(ValueError, match="time"):
        load_report_csv(str(fn))


def test_load_single_row(tmp_path):
    fn = tmp_path / "one.csv"
    pd.DataFrame({"t": [0.0], "distance": [10.0]}).to_csv(fn, index=False)
    t, cols = load_report_csv(str(fn))
    assert t.shape == (1,)
    assert cols["distance"][0] == 10.0


@pytest.mark.parametrize("lunar_units", [False, True])
def test_plot_fall_profile(report_csv, tmp_path, lunar_units):
    out = tmp_path / "profile.png"
    fig = plot_fall_profile(report_csv, save_path=str(out), lunar_units=lunar_units)
    assert isinstance(fig, Figure)
    assert out.exists()
    assert len(fig.axes) == 2


def test_plot_accelerations(report_csv, tmp_path):
    out = tmp_path / "accel.png"
    fig = plot_accelerations(report_csv, save_path=str(out))
    assert isinstance(fig, Figure)
    assert out.exists()


def test_missing_column(tmp_path):
    fn = tmp_path / "partial.csv"
    with CSVLogger(fn, fields=["distance"]) as logger:
        logger.log(ReportRecord(0.0, 0.0, 10.0, 9.8, 0.0, 5.97e24, 1.2))
    with pytest.raises(KeyError, match="velocity"):
        plot_fall_profile(str(fn))
