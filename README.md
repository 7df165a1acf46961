# openrdap

Building blocks for RDAP (Registration Data Access Protocol) clients.

Every RDAP query is answered by some RDAP server. IANA publishes Service
Registry files (`asn.json`, `dns.json`, `ipv4.json`, `ipv6.json`) that say
which servers handle which Autonomous System numbers, domains and IP
networks. This package parses those documents and answers the question
"which RDAP servers can answer this query?".

It also provides the RDAP response models (`Link`, `Notice`, `Remark`,
`Event`, `PublicID`, `Autnum`), decoding bookkeeping (`DecodeData`) and the
client error types (`ClientError`, `ClientErrorType`, `is_client_error`).

The package has no third-party dependencies.

## Looking up RDAP servers

Each registry class takes a registry JSON document (bytes or str):

```python
from openrdap.bootstrap.asn_registry import ASNRegistry
from openrdap.bootstrap.question import Question, RegistryType

with open("asn.json", "rb") as fh:
    registry = ASNRegistry(fh.read())

answer = registry.lookup(Question(RegistryType.ASN, "AS1768"))
print(answer.query, answer.entry, answer.urls)
```

An `Answer` holds the canonicalised `query`, the matching service `entry`
(empty when nothing matched) and the list of RDAP base `urls`.

- `ASNRegistry` (`openrdap.bootstrap.asn_registry`) accepts `"AS1234"`,
  `"as1234"` or `"1234"`; a query that is not an AS number raises
  `ValueError`. `parse_asn` and `parse_asn_range` are available on their own.
- `DNSRegistry` (`openrdap.bootstrap.dns_registry`) matches the longest
  registered suffix of a domain name, case-insensitively, falling back to the
  root zone entry `""` if the document has one.
- `NetRegistry` (`openrdap.bootstrap.net_registry`) takes `ip_version` 4 or 6
  and accepts an address or a CIDR range; the most specific network wins. An
  unparsable query, or one of the other IP version, raises `ValueError`.
- `ServiceProviderRegistry` (`openrdap.bootstrap.service_provider_registry`)
  maps entity handles such as `12345-VRSN` (or the older `12345~VRSN`) to the
  URLs of their service tag.

`RegistryType` names the five registries; `RegistryType.filename()` gives
each one's document filename (for example `dns.json`).

## Registry documents

`parse_registry_file` (`openrdap.bootstrap.registry_file`) turns a document
into a `RegistryFile` with `description`, `publication`, `version`,
`entries` (service entry to URLs) and the raw `document`. Unparsable URLs are
skipped and entries left without URLs are dropped. Invalid JSON or a bad
`services` array raises `MalformedRegistryError`, a `ValueError`; the
registry classes raise it too.

## Response models and errors

`openrdap.models` holds plain dataclasses for RDAP objects. Each carries an
optional `decode_data`: a `DecodeData` (`openrdap.decode_data`) recording the
raw value of every field by its RDAP name (`set_value`, `value`, `fields`,
`unknown_fields`) and warnings per field (`add_note`, `notes`).

`ClientError` (`openrdap.client_error`) is an exception carrying an
`error_type` from `ClientErrorType` and a `text`; `is_client_error` checks an
exception against a type.

## What this package does not do

It does not download registry files, cache them, or send RDAP queries over
the network: you supply the registry documents yourself. It has no
command-line program.