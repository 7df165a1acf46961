"""Bootstrap lookups of entity handles by service provider tag."""

from __future__ import annotations

from openrdap.bootstrap.question import Answer, Question
from openrdap.bootstrap.registry_file import (
    MalformedRegistryError,
    RegistryFile,
    parse_registry_file,
)


class ServiceProviderRegistry:
    """Maps service tags (e.g. ``"VRSN"``) to RDAP base URLs."""

    def __init__(self, document: bytes | str) -> None:
        try:
            self.file: RegistryFile = parse_registry_file(document)
        except MalformedRegistryError as err:
            raise MalformedRegistryError(
                f"Error parsing Service Provider bootstrap: {err}"
            ) from err
        self._services = self.file.entries

    def lookup(self, question: Question) -> Answer:
        """Return the RDAP base URLs for the entity handle in ``question``.

        For ``"53774930-VRSN"`` the URLs for ``"VRSN"`` are returned. The older
        tilde form (``"53774930~VRSN"``) is also accepted. Missing or unknown
        tags give an answer with no URLs.
        """
        query = question.query

        offset = query.rfind("~")
        if offset == -1:
            offset = query.rfind("-")

        if offset == -1 or offset == len(query) - 1:
            return Answer(query=query)

        service = query[offset + 1 :]
        urls = self._services.get(service)
        if urls is None:
            return Answer(query=query)

        return Answer(query=query, entry=service, urls=list(urls))