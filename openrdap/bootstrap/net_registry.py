"""Bootstrap lookups of IPv4 and IPv6 addresses and networks."""

from __future__ import annotations

import ipaddress
import re

from openrdap.bootstrap.question import Answer, Question
from openrdap.bootstrap.registry_file import (
    MalformedRegistryError,
    RegistryFile,
    parse_registry_file,
)

_Network = ipaddress.IPv4Network | ipaddress.IPv6Network

_PREFIX = re.compile(r"[0-9]+")
_ADDRESS_BITS = {4: 32, 6: 128}


def _parse_cidr(text: str) -> _Network:
    """Parse ``address/prefix`` into the network containing that address."""
    address, sep, prefix = text.partition("/")
    if not sep or not _PREFIX.fullmatch(prefix) or "%" in address:
        raise ValueError(f"invalid CIDR address: {text}")
    try:
        return ipaddress.ip_network(text, strict=False)
    except ValueError as err:
        raise ValueError(f"invalid CIDR address: {text}") from err


class NetRegistry:
    """Maps IP networks to RDAP base URLs, from ipv4.json or ipv6.json.

    ``ip_version`` must be 4 or 6; entries of the other version are ignored.
    """

    def __init__(self, document: bytes | str, ip_version: int) -> None:
        if ip_version not in _ADDRESS_BITS:
            raise ValueError(f"Unknown IP version {ip_version}")

        try:
            self.file: RegistryFile = parse_registry_file(document)
        except MalformedRegistryError as err:
            raise MalformedRegistryError(
                f"Error parsing net registry file: {err}"
            ) from err

        self.ip_version = ip_version
        self._bits = _ADDRESS_BITS[ip_version]
        # Prefix length -> network -> RDAP base URLs.
        self._networks: dict[int, dict[_Network, list[str]]] = {}

        for cidr, urls in self.file.entries.items():
            try:
                network = _parse_cidr(cidr)
            except ValueError:
                continue
            if network.version != ip_version:
                continue
            by_network = self._networks.setdefault(network.prefixlen, {})
            by_network.setdefault(network, list(urls))

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the address or CIDR range in ``question``.

        The most specific matching network wins. Raises ValueError for an
        unparsable query or one of the wrong IP version.
        """
        query = question.query
        if "/" not in query:
            query = f"{query}/{self._bits}"

        lookup_net = _parse_cidr(query)
        if lookup_net.version != self.ip_version:
            raise ValueError("Lookup address has wrong IP protocol")

        answer = Answer(query=query)
        for prefix in sorted(self._networks, reverse=True):
            if prefix > lookup_net.prefixlen:
                continue
            candidate = ipaddress.ip_network(
                (lookup_net.network_address, prefix), strict=False
            )
            urls = self._networks[prefix].get(candidate)
            if urls is not None:
                answer.entry = str(candidate)
                answer.urls = list(urls)
                break

        return answer