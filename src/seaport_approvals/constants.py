"""
Protocol constants shared by the approval reader and synthesizer.
"""

from enum import IntEnum

# Largest uint256.  Used both as the "fully approved" sentinel and as the
# allowance requested for fungible tokens.
MAX_INT = 2 ** 256 - 1


class ItemType(IntEnum):
    """Asset class of an offer/consideration item (wire values)."""
    NATIVE = 0
    ERC20 = 1
    ERC721 = 2
    ERC1155 = 3
    ERC721_WITH_CRITERIA = 4
    ERC1155_WITH_CRITERIA = 5
