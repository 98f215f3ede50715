"""Reporting pipeline: ranked charts, animated trend and state maps."""

from .pipeline import create_pipeline

__all__ = ["create_pipeline"]
