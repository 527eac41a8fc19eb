"""
Console output formatting module.

This module handles all user-facing console output: rendered reports,
fatal errors and the final summary.
"""

from pathlib import Path

from tqdm import tqdm

from meetcheck.report import Report


class ConsoleOutput:
    """
    Handles console output for the checker.
    """

    def __init__(self, use_tqdm: bool = False):
        """
        Initialize console output handler.

        Args:
            use_tqdm: If True, write through tqdm.write to avoid breaking a progress bar
        """
        self.use_tqdm = use_tqdm

    def _write(self, message: str):
        if self.use_tqdm:
            tqdm.write(message)
        else:
            print(message)

    def print_report(self, report: Report):
        """Print a report if it recorded anything."""
        if report.has_messages():
            self._write(report.render())

    def fatal_message(self, path: Path, error: Exception):
        """
        Print a file that could not be checked at all.

        Args:
            path: File being checked
            error: Exception that occurred
        """
        self._write(f"{path}\n  Error: {error}")

    def print_summary(self, num_files: int, errors: int, warnings: int):
        """Print the totals over all checked files."""
        print(f"Checked {num_files} file(s): {errors} error(s), {warnings} warning(s)")
