"""Traveler check-in: nearby police station linking and countdown travel tickets."""

__version__ = "0.1.0"
