"""
Item type classification helpers.

Criteria-based items share the approval model of their base class, so
the ERC-721 and ERC-1155 checks accept both variants.
"""

from .constants import ItemType


def is_native_currency_item(item_type: ItemType) -> bool:
    return item_type == ItemType.NATIVE


def is_erc20_item(item_type: ItemType) -> bool:
    return item_type == ItemType.ERC20


def is_currency_item(item_type: ItemType) -> bool:
    return item_type in (ItemType.NATIVE, ItemType.ERC20)


def is_erc721_item(item_type: ItemType) -> bool:
    return item_type in (ItemType.ERC721, ItemType.ERC721_WITH_CRITERIA)


def is_erc1155_item(item_type: ItemType) -> bool:
    return item_type in (ItemType.ERC1155, ItemType.ERC1155_WITH_CRITERIA)
