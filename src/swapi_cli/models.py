"""Flat character record.

Only the four fields the CLI prints are kept. The API does not guarantee that
every field is populated, so each one may be `None`. The id used for the
lookup is not stored on the record.
"""
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class CharacterRecord:
    name: Optional[str] = None
    birth_year: Optional[str] = None
    height: Optional[str] = None
    eye_color: Optional[str] = None
