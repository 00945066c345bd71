"""Encoding and validation helpers for the Amadeus signing client."""
