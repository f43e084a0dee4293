"""
Shared utilities for CVTeX.

Common functionality used across contexts:
- Logger setup with provenance tracking
- Text processing
- Timestamps for log directories
"""

from cvtex.utils.timestamp import now

__all__ = ["now"]
