"""Flights and the whitespace-separated flight file format."""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
from pathlib import Path

__all__ = ["Flight", "parse_flights", "format_flight", "read_flights", "write_flights"]

NAME_LIMIT = 9
_FIELDS_PER_FLIGHT = 6


@dataclass
class Flight:
    """A scheduled flight with its ticket counts."""

    flight_no: str
    start: str
    end: str
    duration: int
    total_tickets: int
    sold_tickets: int

    def __post_init__(self) -> None:
        for label, value in (("flight_no", self.flight_no), ("start", self.start), ("end", self.end)):
            if not value or any(ch.isspace() for ch in value):
                raise ValueError(f"{label} must be a single non-empty word: {value!r}")
            if len(value) > NAME_LIMIT:
                raise ValueError(f"{label} is longer than {NAME_LIMIT} characters: {value!r}")


def parse_flights(text: str) -> list[Flight]:
    """Read flights from a token stream, six fields each.

    Reading stops at the first record that is incomplete or does not parse.
    """
    tokens = iter(text.split())
    flights = []
    for flight_no, start, end, duration, total, sold in zip(*[tokens] * _FIELDS_PER_FLIGHT):
        try:
            flights.append(Flight(flight_no, start, end, int(duration), int(total), int(sold)))
        except ValueError:
            break
    return flights


def format_flight(flight: Flight) -> str:
    """Render a flight as one space-separated line, without a newline."""
    return (
        f"{flight.flight_no} {flight.start} {flight.end} "
        f"{flight.duration} {flight.total_tickets} {flight.sold_tickets}"
    )


def read_flights(path: str | Path) -> list[Flight]:
    """Read all flights from a file; raises OSError if it cannot be opened."""
    return parse_flights(Path(path).read_text(encoding="utf-8"))


def write_flights(path: str | Path, flights: Iterable[Flight]) -> None:
    """Write flights to a file, one per line, replacing its contents."""
    Path(path).write_text("".join(format_flight(f) + "\n" for f in flights), encoding="utf-8")