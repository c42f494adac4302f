"""Saved base colours and the current selection, persisted as JSON.

The library is an explicit object owned by the caller. Nothing in the
colour maths reads it; commands load it, pass the selected colour into
generate_palette, and save it back.

File format:

    {
      "selected": "#ff0000",
      "colours": [{"id": 1, "colour": "#ff0000"}, ...]
    }

A missing file yields a library seeded with the default colour. An emptied
library is reseeded the same way, so there is always something to select.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path

from golden_palette.core.codec import normalize_hex

DEFAULT_COLOUR = '#ff0000'


class LibraryError(ValueError):
    """Raised when a library file cannot be read or holds invalid data."""


@dataclass
class SavedColour:
    id: int
    colour: str


@dataclass
class BaseColourLibrary:
    colours: list[SavedColour] = field(default_factory=list)
    selected: str = DEFAULT_COLOUR

    @classmethod
    def seeded(cls) -> BaseColourLibrary:
        return cls(colours=[SavedColour(1, DEFAULT_COLOUR)], selected=DEFAULT_COLOUR)

    def _next_id(self) -> int:
        return max((c.id for c in self.colours), default=0) + 1

    def find(self, colour: str) -> SavedColour | None:
        key = colour.lower().lstrip('#')
        for saved in self.colours:
            if saved.colour.lower().lstrip('#') == key:
                return saved
        return None

    def add(self, colour: str) -> bool:
        """Save a colour. Returns False if it is already saved (case-insensitive)."""
        value = normalize_hex(colour)
        if self.find(value) is not None:
            return False
        self.colours.append(SavedColour(self._next_id(), value))
        return True

    def select(self, colour: str) -> None:
        self.selected = normalize_hex(colour)

    def delete(self, colour_id: int) -> bool:
        """Remove an entry by id. Returns False if no entry had that id."""
        before = len(self.colours)
        self.colours = [c for c in self.colours if c.id != colour_id]
        if len(self.colours) == before:
            return False
        if not self.colours:
            self.colours = [SavedColour(self._next_id(), DEFAULT_COLOUR)]
        if self.find(self.selected) is None:
            self.selected = self.colours[0].colour
        return True

    def to_dict(self) -> dict:
        return {
            'selected': self.selected,
            'colours': [{'id': c.id, 'colour': c.colour} for c in self.colours],
        }

    @classmethod
    def from_dict(cls, data: dict) -> BaseColourLibrary:
        try:
            colours = [SavedColour(int(item['id']), normalize_hex(item['colour'])) for item in data['colours']]
            selected = normalize_hex(data.get('selected') or DEFAULT_COLOUR)
        except (KeyError, TypeError, ValueError) as e:
            # InvalidHexInput is a ValueError
            raise LibraryError(f'Invalid library data: {e}') from e
        if not colours:
            return cls.seeded()
        return cls(colours=colours, selected=selected)

    def save(self, path: str | Path) -> None:
        path = Path(path).expanduser()
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(json.dumps(self.to_dict(), indent=2) + '\n', encoding='utf-8')


def load_library(path: str | Path) -> BaseColourLibrary:
    """Read a library file. A missing file gives a freshly seeded library."""
    path = Path(path).expanduser()
    if not path.is_file():
        return BaseColourLibrary.seeded()
    try:
        data = json.loads(path.read_text(encoding='utf-8'))
    except json.JSONDecodeError as e:
        raise LibraryError(f'{path}: not valid JSON ({e})') from e
    if not isinstance(data, dict):
        raise LibraryError(f'{path}: expected a JSON object')
    return BaseColourLibrary.from_dict(data)
