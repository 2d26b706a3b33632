#!/usr/bin/env python3

"""Progress tracking for batch path generation."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from time import perf_counter

import psutil


class ProgressTracker:
    """
    Track and report batch progress with timing statistics.

    Every name handed to :meth:`track_name` is counted as processed; names
    whose block raises are counted as failed and the exception propagates.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = perf_counter()
        self.processed_count = 0
        self.failed_count = 0

    @contextmanager
    def track_operation(self, operation_name: str) -> Iterator[None]:
        """
        Track a high-level operation with timing.

        Args:
            operation_name: Name of the operation being tracked
        """
        start_time = perf_counter()

        self.logger.debug(f"Starting operation: {operation_name}")

        try:
            yield
            elapsed = perf_counter() - start_time
            self.logger.debug(f"Completed operation: {operation_name} in {elapsed:.3f}s")
        except Exception as e:
            elapsed = perf_counter() - start_time
            self.logger.error(f"Failed operation: {operation_name} after {elapsed:.3f}s: {e}")
            raise

    @contextmanager
    def track_name(self, name: str) -> Iterator[None]:
        """
        Track the processing of a single input name.

        Args:
            name: Raw name being turned into a path
        """
        self.processed_count += 1
        name_start = perf_counter()

        self.logger.debug(f"Processing name #{self.processed_count}: {name!r} ({len(name)} chars)")

        try:
            yield
        except Exception:
            self.failed_count += 1
            elapsed = perf_counter() - name_start
            self.logger.debug(f"Name #{self.processed_count} failed after {elapsed:.3f}s")
            raise

        elapsed = perf_counter() - name_start
        self.logger.debug(f"Name #{self.processed_count} completed in {elapsed:.3f}s")

    @property
    def succeeded_count(self) -> int:
        """Number of names processed without error."""
        return self.processed_count - self.failed_count

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = perf_counter() - self.start_time
        rate = self.processed_count / total_time if total_time > 0 else 0

        self.logger.info(
            f"Processing complete: {self.processed_count} names, "
            f"{self.succeeded_count} succeeded, {self.failed_count} failed "
            f"in {total_time:.2f}s ({rate:.1f} names/s)"
        )

    def log_memory_usage(self) -> None:
        """Log resident memory of the current process."""
        try:
            memory_mb = psutil.Process().memory_info().rss / 1024 / 1024
        except psutil.Error as e:
            self.logger.debug(f"Could not get memory usage: {e}")
            return

        self.logger.debug(f"Memory usage: {memory_mb:.1f} MB")

