"""Bootstrap lookups of Autonomous System numbers."""

from __future__ import annotations

import bisect
import re
from dataclasses import dataclass

from openrdap.bootstrap.question import Answer, Question
from openrdap.bootstrap.registry_file import (
    MalformedRegistryError,
    RegistryFile,
    parse_registry_file,
)

_DIGITS = re.compile(r"[0-9]+")
_MAX_ASN = 2**32 - 1


def _parse_uint32(text: str) -> int:
    if not _DIGITS.fullmatch(text):
        raise ValueError(f"invalid AS number {text!r}")
    value = int(text)
    if value > _MAX_ASN:
        raise ValueError(f"AS number {text!r} out of range")
    return value


def parse_asn(asn: str) -> int:
    """Parse an AS number such as ``"AS1234"``, ``"as1234"`` or ``"1234"``."""
    return _parse_uint32(asn.lower().lstrip("as"))


def parse_asn_range(text: str) -> tuple[int, int]:
    """Parse ``"1234"`` or ``"1234-5678"`` into a ``(first, last)`` pair."""
    parts = text.split("-")
    if len(parts) > 2:
        raise ValueError("Malformed ASN range")

    first = _parse_uint32(parts[0])
    last = _parse_uint32(parts[1]) if len(parts) == 2 else first

    return (min(first, last), max(first, last))


@dataclass(frozen=True)
class _ASNRange:
    min_asn: int
    max_asn: int
    urls: tuple[str, ...]

    def __str__(self) -> str:
        if self.min_asn == self.max_asn:
            return f"AS{self.min_asn}"
        return f"AS{self.min_asn}-AS{self.max_asn}"


class ASNRegistry:
    """Maps AS numbers to RDAP base URLs, built from an asn.json document."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self.file: RegistryFile = parse_registry_file(document)
        except MalformedRegistryError as err:
            raise MalformedRegistryError(f"Error parsing ASN registry: {err}") from err

        ranges = []
        for entry, urls in self.file.entries.items():
            try:
                first, last = parse_asn_range(entry)
            except ValueError:
                continue
            ranges.append(_ASNRange(first, last, tuple(urls)))

        ranges.sort(key=lambda r: r.min_asn)
        self._ranges = ranges
        self._maxes = [r.max_asn for r in ranges]

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the AS number in ``question``.

        Raises ValueError if the query is not an AS number.
        """
        asn = parse_asn(question.query)

        index = bisect.bisect_left(self._maxes, asn)
        answer = Answer(query=str(asn))

        if index < len(self._ranges):
            match = self._ranges[index]
            if match.min_asn <= asn <= match.max_asn:
                answer.entry = str(match)
                answer.urls = list(match.urls)

        return answer