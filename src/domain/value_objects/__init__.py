"""Domain value objects.

Immutable value objects embedded in entities.
"""

from src.domain.value_objects.address import Address

__all__ = ["Address"]
