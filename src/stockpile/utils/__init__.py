"""Utility functions for stockpile."""

from stockpile.utils.number_parser import parse_price, parse_quantity

__all__ = ["parse_price", "parse_quantity"]
