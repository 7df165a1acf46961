import json

import pytest

from openrdap.bootstrap.dns_registry import DNSRegistry
from openrdap.bootstrap.question import Question
from openrdap.bootstrap.registry_file import MalformedRegistryError

SIMPLE_DOCUMENT = json.dumps(
    {
        "description": "RDAP bootstrap file for Domain Name System registrations",
        "publication": "2017-01-01T00:00:00Z",
        "version": "1.0",
        "services": [
            [["br"], ["https://rdap.registro.example/"]],
            [["cz"], ["https://rdap.nic.example/"]],
            [["example"], ["https://rdap.example.com/"]],
        ],
    }
).encode()

COMPLEX_DOCUMENT = json.dumps(
    {
        "version": "1.0",
        "services": [
            [[""], ["https://example.root", "http://example.root"]],
            [["com"], ["https://example.com", "http://example.com"]],
            [["sub.example.com"], ["https://example.com/sub", "http://example.com/sub"]],
        ],
    }
).encode()


@pytest.mark.parametrize(
    "query, entry, urls",
    [
        ("", "", ["https://example.root", "http://example.root"]),
        ("example.com", "com", ["https://example.com", "http://example.com"]),
        ("sub.example.com", "sub.example.com", ["https://example.com/sub", "http://example.com/sub"]),
        ("sub.sub.example.com", "sub.example.com", ["https://example.com/sub", "http://example.com/sub"]),
        ("example.xyz", "", ["https://example.root", "http://example.root"]),
    ],
)
def test_nested_lookups(query, entry, urls):
    answer = DNSRegistry(COMPLEX_DOCUMENT).lookup(Question(query=query))
    assert answer.entry == entry
    assert answer.urls == urls


@pytest.mark.parametrize(
    "query, entry, urls",
    [
        ("", "", []),
        ("www.EXAMPLE.BR", "br", ["https://rdap.registro.example/"]),
        ("example.xyz", "", []),
        ("example.cz.", "cz", ["https://rdap.nic.example/"]),
    ],
)
def test_simple_lookups(query, entry, urls):
    answer = DNSRegistry(SIMPLE_DOCUMENT).lookup(Question(query=query))
    assert answer.entry == entry
    assert answer.urls == urls


def test_query_is_canonicalised():
    answer = DNSRegistry(SIMPLE_DOCUMENT).lookup(Question(query="WWW.Example.BR."))
    assert answer.query == "www.example.br"


def test_file_entries():
    registry = DNSRegistry(SIMPLE_DOCUMENT)
    assert sorted(registry.file.entries) == ["br", "cz", "example"]


def test_malformed_document():
    with pytest.raises(MalformedRegistryError):
        DNSRegistry(b'{"services": [[["br"]]]}')