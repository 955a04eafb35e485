"""
Role

This module provides data access for job roles and whether they are billable.
"""

from roster.role.repository import RoleRepository

__all__ = ["RoleRepository"]
