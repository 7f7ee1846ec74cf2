"""Flight ticket booking: users, flights, admin and customer workflows over text files."""

__version__ = "0.1.0"