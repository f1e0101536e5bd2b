#!/usr/bin/env python3

"""Progress tracking for translation unit processing."""

import logging
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path
from time import time


class ProgressTracker:
    """
    Track and report mock generation progress.

    Times each processed translation unit and counts the classes and
    methods turned into mocks.
    """

    def __init__(self, logger: logging.Logger):
        """
        Initialize progress tracker.

        Args:
            logger: Logger instance for progress reporting
        """
        self.logger = logger
        self.start_time = time()
        self.tu_count = 0
        self.class_count = 0
        self.method_count = 0

    @contextmanager
    def track_translation_unit(self, source: Path | None) -> Iterator[None]:
        """
        Track processing of one translation unit.

        Args:
            source: Parsed header, or None when parsing a string

        Yields:
            None
        """
        self.tu_count += 1
        tu_start = time()
        label = str(source) if source is not None else "<string>"
        initial_class_count = self.class_count

        self.logger.debug(f"Processing translation unit #{self.tu_count}: {label}")

        try:
            yield
            elapsed = time() - tu_start
            classes = self.class_count - initial_class_count
            self.logger.debug(
                f"Translation unit {label} completed in {elapsed:.3f}s ({classes} classes mocked)"
            )
        except Exception as e:
            elapsed = time() - tu_start
            self.logger.debug(f"Translation unit {label} failed after {elapsed:.3f}s: {e}")
            raise

    def count_class(self, method_count: int) -> None:
        """Record a mocked class and its number of mocked methods."""
        self.class_count += 1
        self.method_count += method_count

    def report_summary(self) -> None:
        """Report final processing statistics."""
        total_time = time() - self.start_time
        self.logger.debug(
            f"Processing complete: {self.tu_count} translation units, "
            f"{self.class_count} classes, {self.method_count} methods in {total_time:.2f}s"
        )

    def reset(self) -> None:
        """Reset all counters and timers."""
        self.start_time = time()
        self.tu_count = 0
        self.class_count = 0
        self.method_count = 0
