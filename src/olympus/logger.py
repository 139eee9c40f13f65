"""
CSV logging for report records with performance optimization.

Buffers data in memory and writes in batches to minimize I/O overhead.
Implements context manager protocol for safe resource handling.
"""
from __future__ import annotations

import csv
from pathlib import Path
from typing import Any, TextIO

from olympus.core.config import SimulationConfig
from olympus.core.state import REPORT_FIELDS, FallResult, ReportRecord


class CSVLogger:
    """
    Buffered CSV logger for report records.

    Also usable as a report sink: ``header`` and ``summary`` are no-ops
    apart from flushing, ``report`` logs the record.

    Parameters
    ----------
    filepath : str | Path
        Output CSV file path
    buffer_size : int
        Number of rows to buffer before writing. Higher = fewer writes but more memory.
    fields : list[str] | None
        Record fields to log. Default: all ReportRecord fields.
        Time is always written as the first column 't'.

    Examples
    --------
    >>> with CSVLogger("fall.csv", fields=["distance", "velocity"]) as logger:
    ...     sim = FallSimulation(config, logger=logger)
    ...     sim.run()
    """

    def __init__(
        self,
        filepath: str | Path,
        buffer_size: int = 1000,
        fields: list[str] | None = None
    ) -> None:
        self.filepath = Path(filepath)
        self.buffer_size = buffer_size
        self.fields = list(fields) if fields is not None else [
            f for f in REPORT_FIELDS if f != "elapsed_time"
        ]

        # Validate fields
        valid_fields = set(REPORT_FIELDS) - {"elapsed_time"}
        invalid = set(self.fields) - valid_fields
        if invalid:
            raise ValueError(
                f"Invalid fields: {invalid}. Valid options: {valid_fields}"
            )

        self._buffer: list[list[str]] = []
        self._file: TextIO | None = None
        self._writer: Any = None  # csv.writer is a function, not a type
        self._header_written = False
        self.rows_logged = 0

        # Ensure parent directory exists
        self.filepath.parent.mkdir(parents=True, exist_ok=True)

    def __enter__(self) -> CSVLogger:
        """Open file for writing."""
        self._file = open(self.filepath, "w", newline="", encoding="utf-8")
        self._writer = csv.writer(self._file)
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        """Close file, flushing any remaining data."""
        self.close()

    def _write_header(self) -> None:
        if self._writer:
            self._writer.writerow(["t", *self.fields])
            if self._file:
                self._file.flush()  # Ensure header written immediately
        self._header_written = True

    def log(self, record: ReportRecord) -> None:
        """
        Log one record to the buffer.

        Automatically opens the file on first call if not using the context
        manager. Writes to disk when the buffer is full.
        """
        if self._file is None:
            self.__enter__()

        if not self._header_written:
            self._write_header()

        row = [f"{record.elapsed_time:.10f}"]  # High precision time
        row.extend(f"{getattr(record, name):.10e}" for name in self.fields)
        self._buffer.append(row)
        self.rows_logged += 1

        if len(self._buffer) >= self.buffer_size:
            self.flush()

    # Report sink interface
    def header(self, config: SimulationConfig) -> None:
        if self._file is None:
            self.__enter__()
        if not self._header_written:
            self._write_header()

    def report(self, record: ReportRecord) -> None:
        self.log(record)

    def summary(self, result: FallResult) -> None:
        self.flush()

    def flush(self) -> None:
        """Write buffered data to disk and clear buffer."""
        if self._writer and self._buffer:
            self._writer.writerows(self._buffer)
            if self._file:
                self._file.flush()
            self._buffer.clear()

    def close(self) -> None:
        """Flush remaining data and close file."""
        self.flush()
        if self._file:
            self._file.close()
            self._file = None
            self._writer = None
