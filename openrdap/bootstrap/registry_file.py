"""Parsing of bootstrap Service Registry JSON documents."""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Any
from urllib.parse import urlsplit


class MalformedRegistryError(ValueError):
    """Raised when a Service Registry document cannot be parsed."""


@dataclass
class RegistryFile:
    """A bootstrap registry file (asn.json, dns.json, ipv4.json, ipv6.json...).

    ``entries`` maps each service entry (e.g. ``"2c00::/12"`` or ``"br"``) to
    its RDAP base URLs. ``document`` holds the raw JSON document.
    """

    description: str = ""
    publication: str = ""
    version: str = ""
    entries: dict[str, list[str]] = field(default_factory=dict)
    document: bytes = b""


_BAD_ESCAPE = re.compile(r"%(?![0-9A-Fa-f]{2})")


def _parse_url(raw: str) -> str:
    """Validate a URL, returning it unchanged or raising ValueError."""
    if any(ord(ch) < 0x20 or ord(ch) == 0x7F for ch in raw):
        raise ValueError("invalid control character in URL")
    if raw.startswith(":"):
        raise ValueError("missing protocol scheme")
    if _BAD_ESCAPE.search(raw):
        raise ValueError("invalid URL escape")
    parts = urlsplit(raw)
    parts.port  # raises ValueError on a malformed port
    return raw


def _field(doc: dict[str, Any], name: str) -> Any:
    if name in doc:
        return doc[name]
    lowered = name.lower()
    for key, value in doc.items():
        if key.lower() == lowered:
            return value
    return None


def _string_field(doc: dict[str, Any], name: str) -> str:
    value = _field(doc, name)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise MalformedRegistryError(f"Malformed bootstrap ({name} is not a string)")
    return value


def _string_list(value: Any) -> list[str]:
    if value is None:
        return []
    if not isinstance(value, list) or not all(
        isinstance(item, str) for item in value
    ):
        raise MalformedRegistryError("Malformed bootstrap (bad services array)")
    return value


def parse_registry_file(document: bytes | str) -> RegistryFile:
    """Parse a bootstrap registry JSON document.

    Unparsable URLs are skipped; entries left without URLs are dropped.
    """
    if isinstance(document, str):
        document = document.encode("utf-8")

    try:
        doc = json.loads(document)
    except ValueError as err:
        raise MalformedRegistryError(f"Malformed bootstrap: {err}") from err

    if doc is None:
        doc = {}
    if not isinstance(doc, dict):
        raise MalformedRegistryError("Malformed bootstrap (not a JSON object)")

    services = _field(doc, "services")
    if services is None:
        services = []
    if not isinstance(services, list):
        raise MalformedRegistryError("Malformed bootstrap (bad services array)")

    result = RegistryFile(
        description=_string_field(doc, "description"),
        publication=_string_field(doc, "publication"),
        version=_string_field(doc, "version"),
        document=document,
    )

    for service in services:
        if not isinstance(service, list) or len(service) != 2:
            raise MalformedRegistryError("Malformed bootstrap (bad services array)")

        names = _string_list(service[0])
        raw_urls = _string_list(service[1])

        urls = []
        for raw_url in raw_urls:
            try:
                urls.append(_parse_url(raw_url))
            except ValueError:
                continue

        if urls:
            for name in names:
                result.entries[name] = list(urls)

    return result