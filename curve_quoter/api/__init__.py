"""HTTP API for the quote service."""
