"""Item catalogue categories.

Stored in the items.item_type discriminator column (single-table
inheritance: Book, Album and Movie share one table).
"""

from enum import Enum


class ItemType(str, Enum):
    """Item catalogue categories (single-table inheritance discriminator)."""

    BOOK = "book"
    ALBUM = "album"
    MOVIE = "movie"
