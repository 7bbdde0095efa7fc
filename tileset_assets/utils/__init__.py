"""Utility helpers."""
from .logging import setup_logging, reset_logging

__all__ = ['setup_logging', 'reset_logging']
