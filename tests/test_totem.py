import random

import pytest

from clinicqueue.models import Priority, Specialty
from clinicqueue.service_config import ConfigStore, ServiceStatus
from clinicqueue.totem import Totem
from clinicqueue.waiting_queue import TicketStore


def scripted(answers):
    items = iter(answers)

    def read(prompt=""):
        try:
            return next(items)
        except StopIteration:
            raise EOFError from None

    return read


@pytest.fixture
def stores(tmp_path):
    return ConfigStore(tmp_path / "atend.dat"), TicketStore(tmp_path / "fila.dat")


def make_totem(stores, answers=()):
    lines = []
    totem = Totem(stores[0], stores[1], scripted(answers), lines.append, random.Random(7))
    return totem, lines


def test_issue_ticket_numbers_in_sequence(stores):
    totem, _ = make_totem(stores)
    tickets = [totem.issue_ticket(Priority.GENERAL, Specialty.OTHER, "Ana") for _ in range(3)]
    assert [t.number for t in tickets] == [1, 2, 3]
    assert totem.last_number == 3


def test_issue_ticket_is_stored(stores):
    totem, _ = make_totem(stores)
    ticket = totem.issue_ticket(Priority.ELDERLY, Specialty.CARDIOLOGY, "Jose\n")
    assert stores[1].load() == ticket
    assert ticket.name == "Jose"
    assert 1 <= ticket.duration <= 10


def test_issue_ticket_counts_specialties(stores):
    totem, _ = make_totem(stores)
    totem.issue_ticket(1, Specialty.CARDIOLOGY, "A")
    totem.issue_ticket(2, Specialty.CARDIOLOGY, "B")
    totem.issue_ticket(3, Specialty.PEDIATRICS, "C")
    assert totem.report["Cardiologista"] == 2
    assert totem.report["Pediatra"] == 1


def test_run_sets_status(stores):
    totem, _ = make_totem(stores, ["3"])
    totem.run()
    assert stores[0].load().status == ServiceStatus.CLOSED


def test_run_start_then_pause(stores):
    totem, _ = make_totem(stores, ["1", "2"])
    totem.run()
    config = stores[0].load()
    assert config.status == ServiceStatus.PAUSED
    assert config.interval == 1


def test_run_issues_ticket_after_invalid_choices(stores):
    totem, lines = make_totem(stores, ["4", "9", "2", "0", "3", "Maria"])
    totem.run()
    ticket = stores[1].load()
    assert ticket.priority == Priority.ELDERLY
    assert ticket.specialty == "Oftalmologista"
    assert ticket.name == "Maria"
    text = "\n".join(lines)
    assert text.count("Opção inválida!") == 2
    assert "sua senha é 1!" in text


def test_run_rejects_unknown_option(stores):
    totem, lines = make_totem(stores, ["abc", "7"])
    totem.run()
    assert sum("Opção inválida!" in line for line in lines) == 2


def test_run_exit_removes_settings(stores):
    totem, lines = make_totem(stores, ["1", "0", "3"])
    totem.run()
    assert not stores[0].path.exists()
    assert "Até a próxima!" in lines[-1]


def test_run_creates_default_settings(stores):
    totem, _ = make_totem(stores, [])
    totem.run()
    assert stores[0].path.exists()
    assert stores[0].load().status == ServiceStatus.PAUSED