"""Administration of user accounts and flights."""

from __future__ import annotations

from .flight import Flight, write_flights
from .flight_manager import FlightManager
from .user import User
from .user_manager import UserManager

__all__ = ["AdminConsole", "describe_user", "describe_flight_row"]


def describe_user(user: User) -> str:
    """The line shown for a user in the user list."""
    return f"ID: {user.id} | {user.username}"


def describe_flight_row(flight: Flight) -> str:
    """The line shown for a flight in the administration list."""
    return (
        f"{flight.flight_no} | {flight.start} | {flight.end} | {flight.duration} hrs"
        f" | {flight.sold_tickets}${flight.total_tickets} ticket"
    )


class AdminConsole:
    """State and actions of the administration screen.

    The console shows either the user pane or the flight pane. An entry can be
    selected for editing; submitting then updates it instead of adding a new one.
    """

    def __init__(self, user_manager: UserManager, flight_manager: FlightManager) -> None:
        self.user_manager = user_manager
        self.flight_manager = flight_manager
        self.show_users = True
        self.selected_user: int | None = None
        self.selected_flight: int | None = None
        self.user_list: list[User] = list(user_manager.users)
        self.flight_list: list[Flight] = flight_manager.read_flights()

    @property
    def title(self) -> str:
        return "User Management" if self.show_users else "Flight Management"

    @property
    def toggle_label(self) -> str:
        return "Switch to Flights" if self.show_users else "Switch to Users"

    def toggle(self) -> bool:
        """Switch between the user and flight panes; returns True if users are shown."""
        self.show_users = not self.show_users
        self.selected_user = None
        self.selected_flight = None
        return self.show_users

    def _refresh_users(self) -> None:
        self.user_list = list(self.user_manager.users)

    def _refresh_flights(self) -> None:
        self.flight_list = self.flight_manager.read_flights()

    def select_user(self, index: int) -> User:
        """Select the user at this list position for editing and return it."""
        user = self.user_list[index] if index >= 0 else self._out_of_range(index)
        self.selected_user = index
        return user

    def delete_user_at(self, index: int) -> None:
        """Delete the user at this list position."""
        user = self.user_list[index] if index >= 0 else self._out_of_range(index)
        self.user_manager.delete_user(user.id)
        self._refresh_users()
        self.selected_user = None

    def submit_user(self, username: str, password: str, role: str) -> User | None:
        """Save the form: update the selected user or add a new one.

        Nothing happens, and None is returned, when username or password is empty.
        """
        if not username or not password:
            return None
        if self.selected_user is not None and 0 <= self.selected_user < len(self.user_list):
            user = User(self.user_list[self.selected_user].id, username, password, role)
            self.user_manager.update_user(user)
        else:
            user = User(self.user_manager.new_user_id(), username, password, role)
            self.user_manager.add_user(user)
        self.selected_user = None
        self._refresh_users()
        return user

    def select_flight(self, index: int) -> Flight:
        """Select the flight at this list position for editing and return it."""
        flight = self.flight_list[index] if index >= 0 else self._out_of_range(index)
        self.selected_flight = index
        return flight

    def delete_flight_at(self, index: int) -> None:
        """Delete the flight at this list position."""
        if not 0 <= index < len(self.flight_list):
            self._out_of_range(index)
        self.flight_manager.delete_flight(index)
        self._refresh_flights()
        self.selected_flight = None

    def submit_flight(
        self,
        flight_no: str,
        start: str,
        end: str,
        duration: str | float,
        total_tickets: str | int,
        sold_tickets: str | int,
    ) -> Flight | None:
        """Save the form: update the selected flight or append a new one.

        Nothing happens, and None is returned, when any field is empty. Raises
        ValueError when a number does not parse or a name is not valid.
        """
        fields = (flight_no, start, end, duration, total_tickets, sold_tickets)
        if any(str(value) == "" for value in fields):
            return None
        flight = Flight(
            str(flight_no),
            str(start),
            str(end),
            int(float(str(duration))),
            int(str(total_tickets).strip()),
            int(str(sold_tickets).strip()),
        )
        flights = list(self.flight_list)
        if self.selected_flight is not None and 0 <= self.selected_flight < len(flights):
            flights[self.selected_flight] = flight
        else:
            flights.append(flight)
        write_flights(self.flight_manager.path, flights)
        self.flight_manager.load()
        self.selected_flight = None
        self._refresh_flights()
        return flight

    @staticmethod
    def _out_of_range(index: int):
        raise IndexError(f"list position out of range: {index}")