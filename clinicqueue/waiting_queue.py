"""First-in first-out waiting line and the single-ticket hand-off file."""

from __future__ import annotations

import struct
from collections import deque
from pathlib import Path
from typing import Iterator

from .models import FIELD_SIZE, Priority, Ticket

_RECORD = struct.Struct(f"<ii{FIELD_SIZE}si{FIELD_SIZE}s")
RECORD_SIZE = _RECORD.size


class WaitingQueue:
    """Tickets served strictly in arrival order."""

    def __init__(self) -> None:
        self._tickets: deque[Ticket] = deque()

    def push(self, ticket: Ticket) -> None:
        self._tickets.append(ticket)

    def pop(self) -> Ticket:
        """Remove and return the first ticket; IndexError when empty."""
        if not self._tickets:
            raise IndexError("waiting queue is empty")
        return self._tickets.popleft()

    def peek(self) -> Ticket | None:
        return self._tickets[0] if self._tickets else None

    def after_first(self) -> Ticket | None:
        """The ticket behind the first one, if any."""
        return self._tickets[1] if len(self._tickets) > 1 else None

    def clear(self) -> None:
        self._tickets.clear()

    def __len__(self) -> int:
        return len(self._tickets)

    def __iter__(self) -> Iterator[Ticket]:
        return iter(self._tickets)

    def __bool__(self) -> bool:
        return bool(self._tickets)


def _text_field(text: str, what: str) -> bytes:
    data = text.encode("utf-8")
    if len(data) >= FIELD_SIZE:
        raise ValueError(f"{what} is longer than {FIELD_SIZE - 1} bytes")
    return data


def encode_ticket(ticket: Ticket) -> bytes:
    """Serialise a ticket to a fixed-size record."""
    return _RECORD.pack(
        ticket.number,
        int(ticket.priority),
        _text_field(ticket.specialty, "specialty"),
        ticket.duration,
        _text_field(ticket.name, "name"),
    )


def _text(raw: bytes) -> str:
    return raw.split(b"\0", 1)[0].decode("utf-8", errors="replace")


def decode_ticket(data: bytes) -> Ticket:
    """Parse a record made by encode_ticket."""
    if len(data) != RECORD_SIZE:
        raise ValueError(f"ticket record must be {RECORD_SIZE} bytes, got {len(data)}")
    number, priority, specialty, duration, name = _RECORD.unpack(data)
    return Ticket(
        number=number,
        priority=Priority(priority),
        specialty=_text(specialty),
        duration=duration,
        name=_text(name),
    )


class TicketStore:
    """File holding the most recently issued ticket."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def save(self, ticket: Ticket) -> None:
        """Write the ticket over the start of the file."""
        record = encode_ticket(ticket)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        mode = "r+b" if self.path.exists() else "wb"
        with self.path.open(mode) as handle:
            handle.seek(0)
            handle.write(record)

    def load(self) -> Ticket | None:
        """Return the stored ticket, or None if nothing was issued yet."""
        if not self.path.exists():
            return None
        data = self.path.read_bytes()
        if not data:
            return None
        return decode_ticket(data[:RECORD_SIZE])

    def remove(self) -> None:
        self.path.unlink(missing_ok=True)