"""
Report module.

Collects the human-readable problems found while checking a single file.
"""

import logging
from dataclasses import dataclass
from pathlib import Path
from typing import List, Tuple, Union

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Message:
    """A single recorded problem."""
    text: str
    is_error: bool = True

    def __str__(self) -> str:
        prefix = 'Error' if self.is_error else 'Warning'
        return f"{prefix}: {self.text}"


class Report:
    """
    Accumulates messages for one checked file.

    Checks never stop at the first problem: every message is recorded here
    and the caller decides pass/fail afterwards.
    """

    def __init__(self, path: Union[str, Path]):
        """
        Initialize an empty report.

        Args:
            path: File the messages refer to
        """
        self.path = Path(path)
        self.messages: List[Message] = []

    def error(self, message: str):
        """Record an error."""
        logger.debug(f"{self.path}: {message}")
        self.messages.append(Message(str(message), is_error=True))

    def warning(self, message: str):
        """
        Record a warning.

        CONFIG.toml problems are all errors; warnings are recorded by the
        per-meet checks that share this report type.
        """
        logger.debug(f"{self.path}: warning: {message}")
        self.messages.append(Message(str(message), is_error=False))

    @property
    def errors(self) -> List[str]:
        return [m.text for m in self.messages if m.is_error]

    @property
    def warnings(self) -> List[str]:
        return [m.text for m in self.messages if not m.is_error]

    def has_messages(self) -> bool:
        return len(self.messages) > 0

    def has_errors(self) -> bool:
        return any(m.is_error for m in self.messages)

    def is_valid(self) -> bool:
        """Check if no errors were recorded. Warnings do not count."""
        return not self.has_errors()

    def count_messages(self) -> Tuple[int, int]:
        """
        Count recorded messages.

        Returns:
            Tuple of (errors, warnings)
        """
        errors = sum(1 for m in self.messages if m.is_error)
        return errors, len(self.messages) - errors

    def render(self) -> str:
        """
        Render the report for a human reader.

        Returns:
            The file path followed by one indented line per message
        """
        lines = [str(self.path)]
        for message in self.messages:
            lines.append(f"  {message}")
        return '\n'.join(lines)
