"""Shared contracts for cursorq.

This package is a LEAF MODULE with no outbound dependencies to core.

Import patterns:
    from cursorq.contracts import OutOfBoundsError
"""

from cursorq.contracts.errors import OutOfBoundsError

__all__ = [
    "OutOfBoundsError",
]
