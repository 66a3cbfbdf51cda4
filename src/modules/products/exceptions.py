"""Product domain exceptions.

Raised by the Service Layer when a use case cannot proceed.
The API layer (Views) catches these and translates them into
appropriate HTTP responses.
"""

from __future__ import annotations


class ProductNotFound(Exception):
    """The requested product does not exist."""
