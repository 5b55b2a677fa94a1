# slotbag/items/item_stack.py
from typing import Any
from slotbag.items.item import Item

class ItemStack:
    """
    A quantity of one item type.

    Two stacks compare equal when they hold the same item type, whatever
    their quantities; an inventory relies on this to find merge targets.
    """

    def __init__(self, item: Item, quantity: int = 1):
        if quantity < 1:
            raise ValueError(f"An ItemStack needs at least one item, got {quantity}.")
        self.item = item
        # Non-stackable items always start alone in their stack
        self.quantity = quantity if item.stackable else 1

    def size(self) -> int:
        return self.quantity

    def add_items(self, count: int) -> None:
        if count < 0:
            raise ValueError(f"Cannot add a negative number of items ({count}).")
        self.quantity += count

    def permits_stacking(self) -> bool:
        """True if more than one unit of this item type may share a slot."""
        return self.item.stackable

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, ItemStack):
            return NotImplemented
        return self.item.obj_id == other.item.obj_id

    def __hash__(self) -> int:
        return hash(self.item.obj_id)

    def __str__(self) -> str:
        return f"{self.item.name} (x{self.quantity})"

    def __repr__(self) -> str:
        return f"ItemStack({self.item!r}, quantity={self.quantity})"
