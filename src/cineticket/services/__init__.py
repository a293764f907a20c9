"""Scheduling, validation and booking services."""

from cineticket.services.cinema import CinemaService

__all__ = ["CinemaService"]
