"""Waiting-room display: collects issued tickets and calls them in turn."""

from __future__ import annotations

import argparse
import time
from pathlib import Path
from typing import Callable

from .models import Priority, Ticket
from .priority_tree import PriorityTree
from .service_config import ConfigStore, ServiceStatus
from .totem import CONFIG_FILE, DEFAULT_DATA_DIR, TICKET_FILE
from .waiting_queue import TicketStore, WaitingQueue


def format_call(ticket: Ticket) -> str:
    """Text announcing that a ticket is being called."""
    return (
        "\n - Chamando para Atendimento - \n"
        f"Senha: {ticket.number} \n"
        f"Prioridade: {int(ticket.priority)} ({Priority(ticket.priority).label()})\n"
        f"Especialidade: {ticket.specialty} \n"
        f"Nome: {ticket.name}\n"
        f"Tempo de atendimento: {ticket.duration} "
    )


class Display:
    """Holds the general line and the priority levels and calls tickets."""

    def __init__(
        self,
        output: Callable[[str], object] | None = None,
        sleep: Callable[[float], object] | None = None,
    ) -> None:
        self._output = output if output is not None else print
        self._sleep = sleep if sleep is not None else time.sleep
        self.queue = WaitingQueue()
        self.tree = PriorityTree()
        self.last_number = 0
        self.previous_status = 0

    def receive(self, ticket: Ticket | None) -> bool:
        """Take a ticket read from the hand-off file; False if already seen."""
        if ticket is None or ticket.number == self.last_number:
            return False
        if ticket.priority == Priority.GENERAL:
            self.queue.push(ticket)
        else:
            self.tree.insert(ticket)
        self.last_number += 1
        return True

    def has_waiting(self) -> bool:
        return bool(self.queue) or bool(self.tree)

    def call_next(self) -> Ticket | None:
        """Call the most urgent ticket and wait for its service time."""
        if self.tree:
            ticket = self.tree.pop_next()
        elif self.queue:
            ticket = self.queue.pop()
        else:
            return None
        self._output(format_call(ticket))
        self._sleep(ticket.duration)
        return ticket

    def next_tickets(self) -> tuple[Ticket | None, Ticket | None]:
        """Tickets due after the one about to be called: (priority, general)."""
        general = self.queue.peek() if self.tree else self.queue.after_first()
        return self.tree.peek_after_next(), general

    def show_next(self) -> None:
        priority, general = self.next_tickets()
        shown = priority.number if priority is not None else "Fila vazia!"
        self._output(f"\n - Próximo da fila com prioridade: {shown} - ")
        shown = general.number if general is not None else "Fila vazia!"
        self._output(f"\n - Próximo da fila sem prioridade: {shown} - ")

    def step(self, status) -> Ticket | None:
        """Act on the current service status; return the ticket called, if any."""
        status = ServiceStatus(status)
        if status == ServiceStatus.SERVING:
            if self.previous_status not in (0, 1):
                self._output("\nAtendimento Iniciado!")
                self.previous_status = 1
            if self.has_waiting():
                self.show_next()
                ticket = self.call_next()
                self.previous_status = 1
                return ticket
            if self.previous_status == 1:
                self._output("\nNenhuma ficha na fila. Aguardando...")
                self.previous_status = 0
        elif status == ServiceStatus.PAUSED:
            if self.previous_status != 2:
                self._output("\nEstamos em intervalo. Por favor, aguarde. ")
                self.previous_status = 2
        return None


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="clinicqueue-tv", description="Waiting-room display for the clinic queue."
    )
    parser.add_argument(
        "--data-dir", default=DEFAULT_DATA_DIR, help="directory of the shared files"
    )
    args = parser.parse_args(argv)
    data_dir = Path(args.data_dir)
    config_store = ConfigStore(data_dir / CONFIG_FILE)
    ticket_store = TicketStore(data_dir / TICKET_FILE)

    display = Display()
    config = config_store.load()
    print("\n" + config.describe())
    while config.status != ServiceStatus.CLOSED:
        time.sleep(1)
        display.receive(ticket_store.load())
        display.step(config.status)
        config = config_store.load()

    display.queue.clear()
    display.tree.clear()
    print("\n" + config.describe())
    ticket_store.remove()
    print("Até a próxima! ")
    time.sleep(3)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())