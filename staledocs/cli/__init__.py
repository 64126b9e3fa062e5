"""Command line interface for staledocs."""

from .main import cli

__all__ = ['cli']
