"""Ticket kiosk: controls the service status and issues numbered tickets."""

from __future__ import annotations

import argparse
from collections import Counter
from pathlib import Path
from typing import Callable

from .models import Priority, Specialty, Ticket, new_ticket
from .service_config import ConfigStore, ServiceStatus
from .waiting_queue import TicketStore

CONFIG_FILE = "configs_atend.dat"
TICKET_FILE = "configs_fila.dat"
DEFAULT_DATA_DIR = "arquivo"

PROMPT = "Informe a opção desejada: "
INVALID = "\nOpção inválida!"

MAIN_MENU = (
    "\n----- MENU INICIAL -----\n"
    "\n0. Sair\n1. Iniciar Atendimento\n2. Pausar Atendimento\n"
    "3. Encerrar Atendimento\n4. Retirar Ficha\n5. Gerar Relatório"
)

PRIORITY_MENU = (
    "\nPrioridade de atendimento:\n"
    "\n1. Gestante\n2. Idoso\n3. Pessoa com necessidades especiais (PNE)\n"
    "4. Criança de colo\n5. Doença Crônica\n6. Demais pacientes"
)

SPECIALTY_MENU = (
    "\nEspecialidade de atendimento:\n"
    "\n1. Cardiologista\n2. Neurologista\n3. Oftalmologista\n"
    "4. Dermatologista\n5. Pediatra\n6. Outro"
)

_STATUS_OPTIONS = {
    1: ServiceStatus.SERVING,
    2: ServiceStatus.PAUSED,
    3: ServiceStatus.CLOSED,
}

_SPECIALTIES = list(Specialty)


def _parse_choice(text: str) -> int:
    try:
        return int(text.strip())
    except ValueError:
        return -1


class Totem:
    """Interactive kiosk that writes settings and tickets for the display."""

    def __init__(
        self,
        config_store: ConfigStore,
        ticket_store: TicketStore,
        input_func: Callable[[str], str] | None = None,
        output: Callable[[str], object] | None = None,
        rng=None,
    ) -> None:
        self.config_store = config_store
        self.ticket_store = ticket_store
        self._input = input_func if input_func is not None else input
        self._output = output if output is not None else print
        self._rng = rng
        self.last_number = 0
        self.report: Counter[str] = Counter()

    def issue_ticket(self, priority, specialty, name) -> Ticket:
        """Create the next numbered ticket, store it and count its specialty."""
        ticket = new_ticket(self.last_number + 1, priority, specialty, name, self._rng)
        self.last_number = ticket.number
        self.ticket_store.save(ticket)
        self.report[ticket.specialty] += 1
        return ticket

    def _choose(self, menu: str) -> int:
        self._output(menu)
        return _parse_choice(self._input(PROMPT))

    def _choose_one_to_six(self, menu: str) -> int:
        choice = self._choose(menu)
        while not 1 <= choice <= 6:
            self._output(INVALID)
            choice = self._choose(menu)
        return choice

    def _ticket_dialog(self) -> Ticket:
        self._output("\n--- Nova Ficha ---")
        priority = Priority(self._choose_one_to_six(PRIORITY_MENU))
        specialty = _SPECIALTIES[self._choose_one_to_six(SPECIALTY_MENU) - 1]
        name = self._input("\nDigite o nome: ")
        ticket = self.issue_ticket(priority, specialty, name)
        self._output(
            f"\nFicha criada com sucesso, sua senha é {ticket.number}! Aguarde."
        )
        return ticket

    def _report_text(self) -> str:
        if not self.report:
            return "\nRelatório de atendimento:\n - Nenhum atendimento registrado."
        lines = ["\nRelatório de atendimento:"]
        lines.extend(f" - {name}: {count}" for name, count in self.report.items())
        return "\n".join(lines)

    def run(self) -> None:
        """Show the menu until the user leaves or input runs out."""
        self.config_store.load()
        try:
            while True:
                choice = self._choose(MAIN_MENU)
                if choice == 0:
                    self.config_store.remove()
                    self._output("\nAté a próxima!")
                    return
                if choice in _STATUS_OPTIONS:
                    self.config_store.update(_STATUS_OPTIONS[choice], 1)
                elif choice == 4:
                    self._ticket_dialog()
                elif choice == 5:
                    self._output(self._report_text())
                else:
                    self._output(INVALID)
        except EOFError:
            return


def main(argv=None) -> int:
    parser = argparse.ArgumentParser(
        prog="clinicqueue-totem", description="Ticket kiosk for the clinic queue."
    )
    parser.add_argument(
        "--data-dir", default=DEFAULT_DATA_DIR, help="directory of the shared files"
    )
    args = parser.parse_args(argv)
    data_dir = Path(args.data_dir)
    Totem(ConfigStore(data_dir / CONFIG_FILE), TicketStore(data_dir / TICKET_FILE)).run()
    return 0


if __name__ == "__main__":
    raise SystemExit(main())