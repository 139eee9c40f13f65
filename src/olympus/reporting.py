"""
Report sinks for simulation output.

The integrator never prints on its own; it hands a header, periodic
ReportRecords and a final FallResult to a sink implementing ReportSink.
"""
from __future__ import annotations

import sys
from typing import Protocol, TextIO

from olympus.core.config import SimulationConfig
from olympus.core.state import FallResult, ReportRecord


class ReportSink(Protocol):
    """Protocol for objects receiving simulation output."""

    def header(self, config: SimulationConfig) -> None:
        ...

    def report(self, record: ReportRecord) -> None:
        ...

    def summary(self, result: FallResult) -> None:
        ...


def format_header(config: SimulationConfig) -> str:
    return f"distance={config.initial_distance}, width={config.width}, mass={config.mass}"


def format_record(record: ReportRecord) -> str:
    """One progress line for a report record."""
    return (
        f"{record.elapsed_time:.2f} sec({record.elapsed_days:.2f} days): "
        f"v:{record.velocity:.2f} m/s ({record.velocity_mph:.2f} mph), "
        f"d:{record.distance:.2f} m ({record.lunar_distance:.2f} moonunits) "
        f"ag:{record.gravity_acceleration:.2f} ad:{record.drag_acceleration:.2f} "
        f"me:{record.enclosed_mass:.2e} density:{record.density:.2f}"
    )


def format_summary(result: FallResult) -> list[str]:
    """The two closing lines of a report."""
    config = result.config
    if config.tartarus:
        first = (
            f"A {config.mass:g} kg anvil, dropped from {config.initial_distance / 1000.0:g} km "
            f"above the earth, falls toward Tartarus for {result.elapsed_days:.2f} days."
        )
    else:
        first = (
            f"A {config.mass:g} kg anvil, dropped from {config.initial_distance / 1000.0:g} km "
            f"above the earth, will strike after {result.elapsed_days:.2f} days."
        )
    second = (
        f"Precisely, after {result.elapsed_time:.2f} seconds it was {result.distance:.2f} m "
        f"above sea level, moving at {result.velocity:.2f} m/s"
    )
    return [first, second]


class TextReporter:
    """
    Line-oriented report written to a text stream.

    Parameters
    ----------
    stream : TextIO | None
        Destination; defaults to ``sys.stdout`` at write time.
    """

    def __init__(self, stream: TextIO | None = None) -> None:
        self._stream = stream

    @property
    def stream(self) -> TextIO:
        return self._stream if self._stream is not None else sys.stdout

    def _write(self, line: str) -> None:
        self.stream.write(line + "\n")

    def header(self, config: SimulationConfig) -> None:
        self._write(format_header(config))

    def report(self, record: ReportRecord) -> None:
        self._write(format_record(record))

    def summary(self, result: FallResult) -> None:
        self._write("")
        for line in format_summary(result):
            self._write(line)
        self.stream.flush()


class RecordingReporter:
    """Keeps everything in memory; handy for tests and notebooks."""

    def __init__(self) -> None:
        self.config: SimulationConfig | None = None
        self.records: list[ReportRecord] = []
        self.result: FallResult | None = None

    def header(self, config: SimulationConfig) -> None:
        self.config = config

    def report(self, record: ReportRecord) -> None:
        self.records.append(record)

    def summary(self, result: FallResult) -> None:
        self.result = result

    def lines(self) -> list[str]:
        """Render the recorded run the way TextReporter would."""
        out: list[str] = []
        if self.config is not None:
            out.append(format_header(self.config))
        out.extend(format_record(r) for r in self.records)
        if self.result is not None:
            out.append("")
            out.extend(format_summary(self.result))
        return out


class NullReporter:
    """Discards all output."""

    def header(self, config: SimulationConfig) -> None:
        pass

    def report(self, record: ReportRecord) -> None:
        pass

    def summary(self, result: FallResult) -> None:
        pass


class MultiReporter:
    """Forwards every call to several sinks, in order."""

    def __init__(self, *sinks: ReportSink) -> None:
        self.sinks = list(sinks)

    def header(self, config: SimulationConfig) -> None:
        for s in self.sinks:
            s.header(config)

    def report(self, record: ReportRecord) -> None:
        for s in self.sinks:
            s.report(record)

    def summary(self, result: FallResult) -> None:
        for s in self.sinks:
            s.summary(result)
