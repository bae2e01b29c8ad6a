"""Schema module for timecodec.

This module provides pydantic field types for RFC 3339 values.
"""

from . import types

__all__ = ["types"]
