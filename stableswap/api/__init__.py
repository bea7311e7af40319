"""HTTP API for the Stable2 pricing functions."""
