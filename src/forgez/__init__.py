"""Forgez quest progression, XP ledger and archetype quiz engine."""

__version__ = "0.1.0"
