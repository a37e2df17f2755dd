"""
Base class for everything that can be read off a ByteCursor.

Composite records decode their fields by calling consensus_decode() on each
field type in wire order.
"""

from abc import ABC, abstractmethod

from txdecode.reader import ByteCursor


class Decodable(ABC):
    """Abstract base for entities decodable from a byte cursor."""

    @classmethod
    @abstractmethod
    def consensus_decode(cls, cursor: ByteCursor, **options):
        """
        Read one instance from the cursor, advancing it past the encoding.

        Implementations raise instead of returning partial values.
        """
        ...
