"""
Command-line interface for the NativeRollup SDK.
"""
from .main import app

__all__ = ["app"]
