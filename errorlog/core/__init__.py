"""Error log domain: records, ports, connection resolution and exceptions."""
