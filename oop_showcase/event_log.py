"""
Event Log Module

Append-only, hash-chained log of human readable events shared by every
component of a run. One EventLog is created at process start and handed to
the components that need it; nothing looks it up globally.

Each line is mirrored to standard output as "[<ISO-8601 timestamp>] <message>".
"""

import hashlib
import json
import logging
import sys
from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Any, Dict, Iterator, List, Optional, TextIO, Tuple

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class EventLogEntry:
    """
    Immutable log line with hash chaining for tamper detection
    """
    sequence: int
    timestamp: datetime
    message: str
    previous_hash: str
    current_hash: str

    @property
    def line(self) -> str:
        """Formatted line as written to stdout"""
        return f"[{self.timestamp.isoformat()}] {self.message}"

    @staticmethod
    def calculate_hash(sequence: int, timestamp: datetime, message: str, previous_hash: str) -> str:
        """SHA-256 over the entry's content and its predecessor's hash"""
        hash_data = {
            'sequence': sequence,
            'timestamp': timestamp.isoformat(),
            'message': message,
            'previous_hash': previous_hash
        }
        json_data = json.dumps(hash_data, sort_keys=True, separators=(',', ':'))
        return hashlib.sha256(json_data.encode('utf-8')).hexdigest()

    def verify_hash(self) -> bool:
        """Verify that the current hash is correct"""
        expected = self.calculate_hash(self.sequence, self.timestamp, self.message, self.previous_hash)
        return self.current_hash == expected


class EventLog:
    """
    Process-wide append-only event sink

    Never truncated: it grows for the lifetime of the process.
    """

    def __init__(self, echo: bool = True, stream: Optional[TextIO] = None):
        self._entries: List[EventLogEntry] = []
        self._last_hash = ""
        self.echo = echo
        self._stream = stream

    def log(self, message: str) -> EventLogEntry:
        """
        Append a timestamped message and mirror it to stdout

        Args:
            message: Human readable event description

        Returns:
            The appended EventLogEntry
        """
        now = datetime.now(timezone.utc)
        sequence = len(self._entries)
        entry = EventLogEntry(
            sequence=sequence,
            timestamp=now,
            message=message,
            previous_hash=self._last_hash,
            current_hash=EventLogEntry.calculate_hash(sequence, now, message, self._last_hash)
        )
        self._entries.append(entry)
        self._last_hash = entry.current_hash

        if self.echo:
            # Resolved at write time so redirected stdout is honoured
            stream = self._stream or sys.stdout
            print(entry.line, file=stream)

        logger.debug("event logged", extra={'extra': {'sequence': sequence, 'event': message}})
        return entry

    @property
    def entries(self) -> Tuple[EventLogEntry, ...]:
        """Snapshot of all entries in append order"""
        return tuple(self._entries)

    def lines(self) -> List[str]:
        """All entries formatted as output lines"""
        return [entry.line for entry in self._entries]

    def messages(self) -> List[str]:
        """All raw messages without timestamps"""
        return [entry.message for entry in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[EventLogEntry]:
        return iter(tuple(self._entries))

    def verify_integrity(self) -> Dict[str, Any]:
        """
        Verify the integrity of the entire hash chain

        Returns:
            Dictionary with integrity check results
        """
        result = {
            'valid': True,
            'total_entries': len(self._entries),
            'hash_errors': [],
            'chain_breaks': []
        }

        previous_hash = ""
        for position, entry in enumerate(self._entries):
            if not entry.verify_hash():
                result['valid'] = False
                result['hash_errors'].append(position)
            if entry.previous_hash != previous_hash:
                result['valid'] = False
                result['chain_breaks'].append(position)
            previous_hash = entry.current_hash

        return result
