"""Service status shared between the kiosk and the display."""

from __future__ import annotations

import struct
from dataclasses import dataclass
from enum import IntEnum
from pathlib import Path

_RECORD = struct.Struct("<ii")


class ServiceStatus(IntEnum):
    SERVING = 1
    PAUSED = 2
    CLOSED = 3


_STATUS_TEXT = {
    ServiceStatus.SERVING: "Atendendo",
    ServiceStatus.PAUSED: "Atendimento em intervalo",
    ServiceStatus.CLOSED: "Atendimento Encerrado",
}


@dataclass
class ServiceConfig:
    """Current status and polling interval in seconds."""

    status: ServiceStatus = ServiceStatus.PAUSED
    interval: int = 1

    def describe(self) -> str:
        """Human-readable summary of the settings."""
        return (
            "Configurações:\n"
            f" - Status: {_STATUS_TEXT[ServiceStatus(self.status)]}\n"
            f" - Intervalo: {self.interval} segundo\n"
        )


class ConfigStore:
    """File holding the service settings."""

    def __init__(self, path) -> None:
        self.path = Path(path)

    def load(self) -> ServiceConfig:
        """Read the settings, writing the defaults first if the file is missing."""
        if not self.path.exists():
            config = ServiceConfig()
            self.save(config)
            return config
        data = self.path.read_bytes()
        if len(data) < _RECORD.size:
            raise ValueError(f"settings file {self.path} is truncated")
        status, interval = _RECORD.unpack_from(data)
        return ServiceConfig(ServiceStatus(status), interval)

    def save(self, config: ServiceConfig) -> None:
        record = _RECORD.pack(int(config.status), config.interval)
        self.path.parent.mkdir(parents=True, exist_ok=True)
        mode = "r+b" if self.path.exists() else "wb"
        with self.path.open(mode) as handle:
            handle.seek(0)
            handle.write(record)

    def update(self, status, interval) -> ServiceConfig:
        """Store new settings and return them."""
        config = ServiceConfig(ServiceStatus(status), interval)
        self.save(config)
        return config

    def remove(self) -> None:
        self.path.unlink(missing_ok=True)