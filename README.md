# flyticket

A small flight ticket booking library. Users and flights live in plain
whitespace-separated text files; the package loads them, lets an
administrator manage both, and lets customers browse and buy tickets.

## Data files

Users, one per line: an id, a user name, a password and a role. Lines
with fewer than four fields or a non-numeric id are skipped on loading.

```
1 admin password admin
2 alice password user
```

Flights, one per line: flight number, departure, destination, duration
in whole hours, total tickets and tickets sold. Flight number, departure
and destination must each be a single word of at most 9 characters.
Reading stops at the first record that is incomplete or does not parse.

```
AA123 Paris Tokyo 12 200 0
BA456 London Rome 2 150 10
```

A user whose role is `admin` is meant for the administration workflow;
every other role for the customer workflow.

## Modules

- `flyticket.user` — the `User` dataclass (`id`, `username`, `password`,
  `role`), with `parse_user_line` and `format_user` for the users file.
- `flyticket.user_manager` — `UserManager(path="users.txt")`, which loads
  the users file on creation and rewrites it after every change. It offers
  `load`, `save`, `authenticate`, `add_user`, `update_user`, `delete_user`,
  `get_user` and `new_user_id` (one more than the largest id, or 1).
- `flyticket.flight` — the `Flight` dataclass (`flight_no`, `start`, `end`,
  `duration`, `total_tickets`, `sold_tickets`), with `parse_flights`,
  `format_flight`, `read_flights` and `write_flights`.
- `flyticket.flight_manager` — `FlightManager(path="flights.txt")`, which
  keeps the flights file in step with `add_flight`, `update_flight` and
  `delete_flight` (positions out of range are ignored). `read_flights`
  returns what is currently in the file; `search_by_flight_no` searches the
  in-memory list.
- `flyticket.admin` — `AdminConsole`, the administrator's workflow:
  switch between the user and flight panes with `toggle` (see `title` and
  `toggle_label`), pick rows with `select_user` / `select_flight`, remove
  them with `delete_user_at` / `delete_flight_at`, and add or update with
  `submit_user` / `submit_flight`. A submit with an empty field does nothing
  and returns `None`; `submit_flight` accepts numbers as text and truncates a
  fractional duration. `describe_user` and `describe_flight_row` render list
  rows.
- `flyticket.user_panel` — `FlightBrowser`, the customer's workflow:
  `filter` by departure and destination (an empty value matches any), then
  `buy` a ticket on a shown flight. The outcome text is kept in `message`.
  A purchase is refused only when the flight has no tickets at all; the
  sold count is not checked against the total.
- `flyticket.login` — `LoginForm`, holding the sign-in form's state: the
  focused `Field`, at most 20 ASCII characters per field, `backspace`,
  `tab` to move focus, `submit` to authenticate, `reset`, and
  `password_display` (one `D` per typed character). `load_users` adds every
  user in a file to a `UserManager` and returns them.
- `flyticket.colors` — the `Color` RGBA dataclass and `interpolate`, which
  blends two colours with `t` clamped to 0..1.

## Example

```python
from flyticket.user_manager import UserManager
from flyticket.flight_manager import FlightManager
from flyticket.admin import AdminConsole
from flyticket.user_panel import FlightBrowser, describe_flight

users = UserManager("users.txt")
flights = FlightManager("flights.txt")

password = "password"
user = users.authenticate("admin", password)

admin = AdminConsole(users, flights)
admin.toggle()  # switch to flight management
admin.submit_flight("AA123", "Paris", "Tokyo", "12", "200", "0")

browser = FlightBrowser(flights)
browser.filter("Paris", "Tokyo")
browser.buy(0)
print(browser.message)
```

`describe_flight` renders a flight the way the customer list shows it,
for example `AA123 | Paris -> Tokyo | 12h | 0/200`.

## What this package does not do

It has no window, screen or drawing code and installs no command: the
sign-in form, administration console and flight browser are plain objects
whose methods a front end would call. Passwords are stored and compared as
plain text, and storage is limited to the two text files described above.