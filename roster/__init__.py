"""Roster: student records over Redis hashes, with CSV bulk import."""

__version__ = "1.0.0"
