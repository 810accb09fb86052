"""HTTP API for Geo Gate."""
