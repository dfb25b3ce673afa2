"""Ticket and category types shared by the kiosk and the display."""

from __future__ import annotations

import random
from dataclasses import dataclass
from enum import Enum, IntEnum

FIELD_SIZE = 50
"""Size in bytes of a stored text field, terminator included."""


class Priority(IntEnum):
    """Service priority; a lower value is called first."""

    PREGNANT = 1
    ELDERLY = 2
    SPECIAL_NEEDS = 3
    INFANT = 4
    CHRONIC_ILLNESS = 5
    GENERAL = 6

    def label(self) -> str:
        """Short name shown on the display."""
        return _PRIORITY_LABELS[self]


_PRIORITY_LABELS = {
    Priority.PREGNANT: "Gestante",
    Priority.ELDERLY: "Idoso",
    Priority.SPECIAL_NEEDS: "PNE",
    Priority.INFANT: "Criança de colo",
    Priority.CHRONIC_ILLNESS: "Doença crônica",
    Priority.GENERAL: "Demais pacientes",
}


class Specialty(str, Enum):
    """Medical specialty a ticket is issued for."""

    CARDIOLOGY = "Cardiologista"
    NEUROLOGY = "Neurologista"
    OPHTHALMOLOGY = "Oftalmologista"
    DERMATOLOGY = "Dermatologista"
    PEDIATRICS = "Pediatra"
    OTHER = "Outro"


@dataclass(frozen=True)
class Ticket:
    """A numbered ticket waiting to be called."""

    number: int
    priority: Priority
    specialty: str
    duration: int
    name: str


def _fit(text: str, size: int = FIELD_SIZE - 1) -> str:
    """Cut text so that its UTF-8 form takes at most ``size`` bytes."""
    return text.encode("utf-8")[:size].decode("utf-8", errors="ignore")


def new_ticket(number, priority, specialty, name, rng=None) -> Ticket:
    """Build a ticket with a random service time of 1 to 10 seconds."""
    rng = rng if rng is not None else random
    if isinstance(specialty, Specialty):
        specialty = specialty.value
    return Ticket(
        number=number,
        priority=Priority(priority),
        specialty=_fit(str(specialty)),
        duration=rng.randint(1, 10),
        name=_fit(name.rstrip("\r\n")),
    )