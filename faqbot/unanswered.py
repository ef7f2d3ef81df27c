"""Append-only log of questions the FAQ service could not answer."""

import logging
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path

TIMESTAMP_FORMAT = "%Y-%m-%d %H:%M:%S"


@dataclass
class UnansweredLogEntry:
    """A single logged question."""

    timestamp: datetime
    message: str


class UnansweredQuestionLog:
    """Records unanswered questions so they can be curated into new FAQs."""

    def __init__(self, path: Path | str, logger: logging.Logger | None = None):
        self.path = Path(path)
        self.logger = logger or logging.getLogger(__name__)
        self.logger.debug(f"Unanswered questions will be logged in {self.path}")

    def record(self, message: str) -> None:
        """Append a timestamped entry for the original message.

        Raises:
            OSError: If the log file cannot be written
        """
        entry = f"\n{datetime.now().strftime(TIMESTAMP_FORMAT)} {message}"
        with self.path.open("a", encoding="utf-8") as f:
            f.write(entry)
        self.logger.info(f"Logged unanswered question: {message}")

    def entries(self) -> list[UnansweredLogEntry]:
        """Read back every entry, oldest first."""
        if not self.path.exists():
            return []

        entries = []
        for line in self.path.read_text(encoding="utf-8").splitlines():
            if not line.strip():
                continue
            # Timestamp is "date time", the message is everything after it
            parts = line.split(" ", 2)
            try:
                timestamp = datetime.strptime(" ".join(parts[:2]), TIMESTAMP_FORMAT)
            except ValueError:
                self.logger.warning(f"Skipping malformed unanswered log line: {line!r}")
                continue
            entries.append(UnansweredLogEntry(timestamp=timestamp, message=parts[2] if len(parts) > 2 else ""))
        return entries
