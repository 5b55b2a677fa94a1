"""
slotbag
A bounded, slot-based item inventory.
"""
from slotbag.items.item import Item
from slotbag.items.item_stack import ItemStack
from slotbag.items.inventory import Inventory, InvalidCapacityError

__all__ = ["Item", "ItemStack", "Inventory", "InvalidCapacityError"]
