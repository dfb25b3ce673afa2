"""Clinic waiting-room ticketing: a kiosk, a display and priority queues."""

__version__ = "0.1.0"