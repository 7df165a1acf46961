"""RDAP response objects shared across object classes, and Autnum."""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any

from openrdap.decode_data import DecodeData


@dataclass
class Link:
    """A link to another resource on the Internet (RFC 7483 section 4.2)."""

    value: str = ""
    rel: str = ""
    href: str = ""
    href_lang: list[str] = field(default_factory=list)
    title: str = ""
    media: str = ""
    type: str = ""
    decode_data: DecodeData | None = None


@dataclass
class Notice:
    """Information about the entire RDAP response (RFC 7483 section 4.3)."""

    title: str = ""
    type: str = ""
    description: list[str] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    decode_data: DecodeData | None = None


@dataclass
class Remark:
    """Information about the containing RDAP object (RFC 7483 section 4.3)."""

    title: str = ""
    type: str = ""
    description: list[str] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    decode_data: DecodeData | None = None


@dataclass
class Event:
    """An event that has occurred or may occur (RFC 7483 section 4.5)."""

    action: str = ""
    actor: str = ""
    date: str = ""
    links: list[Link] = field(default_factory=list)
    decode_data: DecodeData | None = None


@dataclass
class PublicID:
    """A public identifier mapped to an object class (RFC 7483 section 4.8)."""

    type: str = ""
    identifier: str = ""
    decode_data: DecodeData | None = None


@dataclass
class Autnum:
    """An Autonomous System registration; a topmost RDAP response object."""

    handle: str = ""
    start_autnum: int | None = None
    end_autnum: int | None = None
    ip_version: str = ""
    name: str = ""
    type: str = ""
    status: list[str] = field(default_factory=list)
    country: str = ""
    entities: list[Any] = field(default_factory=list)
    remarks: list[Remark] = field(default_factory=list)
    links: list[Link] = field(default_factory=list)
    port43: str = ""
    events: list[Event] = field(default_factory=list)
    lang: str = ""
    conformance: list[str] = field(default_factory=list)
    object_class_name: str = ""
    notices: list[Notice] = field(default_factory=list)
    decode_data: DecodeData | None = None