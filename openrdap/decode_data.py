"""Snapshot of the raw fields of a decoded RDAP object."""

from __future__ import annotations

from typing import Any


class DecodeData:
    """Raw field values and decoding notes for one RDAP object.

    Every field seen while decoding is recorded under its RDAP name (for
    example ``"port43"``), whether the decoder knew it or not. This makes the
    values of unknown fields available. Minor warnings raised while decoding
    a field are kept as notes against that field's name.

    The snapshot is independent of the object's own attributes and is not
    kept in sync with them.
    """

    def __init__(self) -> None:
        self._known: set[str] = set()
        self._values: dict[str, Any] = {}
        self._notes: dict[str, list[str]] = {}

    def notes(self, name: str) -> list[str]:
        """Return the warnings recorded while decoding the field ``name``."""
        return list(self._notes.get(name, ()))

    def value(self, name: str) -> Any:
        """Return the raw value of the field ``name``, or None if absent."""
        return self._values.get(name)

    def fields(self) -> list[str]:
        """Return the names of all decoded fields, known and unknown."""
        return list(self._values)

    def unknown_fields(self) -> list[str]:
        """Return the names of decoded fields the decoder did not know."""
        return [name for name in self._values if name not in self._known]

    def add_note(self, name: str, note: str) -> None:
        """Record a warning ``note`` against the field ``name``."""
        self._notes.setdefault(name, []).append(note)

    def set_value(self, name: str, value: Any, known: bool = False) -> None:
        """Record the raw ``value`` of field ``name``.

        ``known`` marks the field as one the decoder understands.
        """
        self._values[name] = value
        if known:
            self._known.add(name)
        else:
            self._known.discard(name)

    def __repr__(self) -> str:
        return f"DecodeData(fields={self.fields()!r}, notes={self._notes!r})"