"""HTTP API over the uptime calculator."""
