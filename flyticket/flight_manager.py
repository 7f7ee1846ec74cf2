"""A file-backed list of flights."""

from __future__ import annotations

import logging
from pathlib import Path

from .flight import Flight
from .flight import read_flights as _read_flights
from .flight import write_flights as _write_flights

__all__ = ["FlightManager"]

logger = logging.getLogger(__name__)


class FlightManager:
    """Keeps flights in memory and writes every change back to a text file."""

    def __init__(self, path: str | Path = "flights.txt") -> None:
        self.path = Path(path)
        self.flights: list[Flight] = []
        self.load()

    def load(self) -> None:
        """Replace the in-memory flights with the file's; a missing file gives none."""
        try:
            self.flights = _read_flights(self.path)
        except OSError:
            self.flights = []

    def save(self) -> None:
        _write_flights(self.path, self.flights)

    def add_flight(self, flight: Flight) -> None:
        self.flights.append(flight)
        self.save()

    def delete_flight(self, index: int) -> None:
        """Remove the flight at this position; positions out of range are ignored."""
        if 0 <= index < len(self.flights):
            del self.flights[index]
            self.save()

    def update_flight(self, index: int, flight: Flight) -> None:
        """Replace the flight at this position; positions out of range are ignored."""
        if 0 <= index < len(self.flights):
            self.flights[index] = flight
            self.save()

    def read_flights(self) -> list[Flight]:
        """Read the flights currently stored in the file, not the in-memory list."""
        try:
            return _read_flights(self.path)
        except OSError as error:
            logger.error("Could not open %s: %s", self.path, error)
            return []

    def search_by_flight_no(self, flight_no: str) -> list[Flight]:
        return [f for f in self.flights if f.flight_no == flight_no]