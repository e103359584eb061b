"""Utility modules."""

from .parser import extract_json, parse_distance_response, parse_listings_response

__all__ = ["extract_json", "parse_listings_response", "parse_distance_response"]
