"""Post-run plots of logged fall simulations."""

from .plotting import load_report_csv, plot_accelerations, plot_fall_profile

__all__ = ["load_report_csv", "plot_fall_profile", "plot_accelerations"]
