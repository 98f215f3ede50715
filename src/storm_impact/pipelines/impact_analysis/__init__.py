"""Aggregation, impact scoring and per-capita tables for storm events."""

from .pipeline import create_pipeline

__all__ = ["create_pipeline"]
