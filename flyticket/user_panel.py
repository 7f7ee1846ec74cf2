"""Browsing, filtering and buying tickets for flights."""

from __future__ import annotations

from .flight import Flight
from .flight_manager import FlightManager

__all__ = ["FlightBrowser", "describe_flight"]

PURCHASED = "Ticket Purchased Successfully!"
SOLD_OUT = "No more tickets available."


def describe_flight(flight: Flight) -> str:
    """The line shown for a flight in the passenger's list."""
    return (
        f"{flight.flight_no} | {flight.start} -> {flight.end} | {flight.duration}h"
        f" | {flight.sold_tickets}/{flight.total_tickets}"
    )


class FlightBrowser:
    """The passenger's view: a list of flights that can be filtered and bought from."""

    def __init__(self, flight_manager: FlightManager) -> None:
        self.flight_manager = flight_manager
        self.all_flights: list[Flight] = flight_manager.read_flights()
        self.filtered_flights: list[Flight] = list(self.all_flights)
        self.message: str | None = None

    def filter(self, start: str = "", end: str = "") -> list[Flight]:
        """Keep flights matching departure and destination; an empty value matches any."""
        self.filtered_flights = [
            f
            for f in self.all_flights
            if (not start or start == f.start) and (not end or end == f.end)
        ]
        return self.filtered_flights

    def buy(self, index: int) -> bool:
        """Buy a ticket on the shown flight at this position.

        Returns True on success; the outcome text is kept in ``message``.
        """
        if index < 0:
            raise IndexError(f"list position out of range: {index}")
        flight = self.filtered_flights[index]
        if flight.total_tickets <= 0:
            self.message = SOLD_OUT
            return False
        flight.sold_tickets += 1
        stored = next(
            (f for f in self.flight_manager.flights if f.flight_no == flight.flight_no), None
        )
        if stored is not None and stored is not flight:
            stored.sold_tickets += 1
        self.flight_manager.save()
        self.message = PURCHASED
        return True