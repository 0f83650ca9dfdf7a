"""Command-line client for the Star Wars API (SWAPI)."""
from .errors import DecodeError, SwapiError, TransportError
from .models import CharacterRecord

__all__ = ["CharacterRecord", "DecodeError", "SwapiError", "TransportError"]
