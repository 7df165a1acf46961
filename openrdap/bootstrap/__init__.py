"""Parse IANA Service Registry documents and find the RDAP servers for a query."""