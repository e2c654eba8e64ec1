"""socialnet: user registration and login over a JSON REST API."""

__version__ = "0.1.0"
