"""Salary and headcount reporting over people, locations and roles."""
