"""
Immutable data container models for railway-oriented programming pipelines.

This module provides the Pydantic-based record that is propagated through the
railway functions of the identicon pipeline. The record is a type-safe,
validated container: every stage receives an unmodified input and returns a
new, re-validated copy, so an invariant broken by one stage fails right at that
stage boundary instead of surfacing as a corrupt image.
"""

from .identicon import IdenticonImage


__all__ = ["IdenticonImage"]
