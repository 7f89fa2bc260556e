"""mongo-init: create the application MongoDB user at first boot."""

__version__ = "0.1.0"
