"""Models, identifiers, flags, validation and request payloads for the Discord user API."""

__version__ = "0.2.0"