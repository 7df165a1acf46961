"""Bootstrap registry types, questions and answers."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field


class RegistryType(enum.Enum):
    """A bootstrap registry type."""

    DNS = enum.auto()
    IPV4 = enum.auto()
    IPV6 = enum.auto()
    ASN = enum.auto()
    SERVICE_PROVIDER = enum.auto()

    def __str__(self) -> str:
        return _NAMES[self]

    def filename(self) -> str:
        """Return the registry's JSON document filename."""
        return _FILENAMES[self]


_NAMES = {
    RegistryType.DNS: "dns",
    RegistryType.IPV4: "ipv4",
    RegistryType.IPV6: "ipv6",
    RegistryType.ASN: "asn",
    RegistryType.SERVICE_PROVIDER: "serviceprovider",
}

_FILENAMES = {
    RegistryType.ASN: "asn.json",
    RegistryType.DNS: "dns.json",
    RegistryType.IPV4: "ipv4.json",
    RegistryType.IPV6: "ipv6.json",
    # No official filename exists yet for the Service Provider registry.
    RegistryType.SERVICE_PROVIDER: "serviceprovider-draft-03.json",
}


@dataclass(frozen=True)
class Question:
    """A bootstrap query.

    ``timeout`` optionally limits, in seconds, any download the lookup needs.
    """

    registry_type: RegistryType = RegistryType.DNS
    query: str = ""
    timeout: float | None = None


@dataclass
class Answer:
    """The result of bootstrapping a single query.

    ``query`` is the canonicalised query looked up, ``entry`` the matching
    service entry (empty if none), and ``urls`` the RDAP base URLs.
    """

    query: str = ""
    entry: str = ""
    urls: list[str] = field(default_factory=list)