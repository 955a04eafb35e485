"""
Person

This package provides data access for people and the canned salary
and headcount reports built on top of them.
"""

from roster.person.report import PersonReport
from roster.person.repository import PersonRepository

__all__ = ["PersonReport", "PersonRepository"]
