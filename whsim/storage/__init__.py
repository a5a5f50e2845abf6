# whsim/storage/__init__.py
from .items import GoodsType, Item, ItemHistory, ItemTemplate
from .pools import ResourcePool, Shelf, Terminal

__all__ = [
    "GoodsType",
    "Item",
    "ItemHistory",
    "ItemTemplate",
    "ResourcePool",
    "Shelf",
    "Terminal",
]
