"""Bootstrap lookups of domain names."""

from __future__ import annotations

from openrdap.bootstrap.question import Answer, Question
from openrdap.bootstrap.registry_file import (
    MalformedRegistryError,
    RegistryFile,
    parse_registry_file,
)


class DNSRegistry:
    """Maps domain labels (e.g. ``"br"``) to RDAP base URLs, from dns.json."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self.file: RegistryFile = parse_registry_file(document)
        except MalformedRegistryError as err:
            raise MalformedRegistryError(f"Error parsing DNS bootstrap: {err}") from err
        self._dns = self.file.entries

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the domain name in ``question``.

        The longest matching suffix wins, e.g. for ``an.example.com`` the
        entries ``an.example.com``, ``example.com``, ``com`` and ``""`` (the
        root zone) are tried in turn.
        """
        query = question.query
        if query.endswith("."):
            query = query[:-1]
        query = query.lower()

        fqdn = query
        while True:
            urls = self._dns.get(fqdn)
            if urls is not None:
                return Answer(query=query, entry=fqdn, urls=list(urls))
            if fqdn == "":
                return Answer(query=query, entry=fqdn)
            _, _, fqdn = fqdn.partition(".")