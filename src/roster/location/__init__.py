"""
Location

This module provides data access for the offices people work from.
"""

from roster.location.repository import LocationRepository

__all__ = ["LocationRepository"]
