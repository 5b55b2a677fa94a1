# slotbag/items/item.py
from typing import Optional
import uuid

class Item:
    """An item type. Stacks of the same obj_id hold the same kind of item."""

    def __init__(self, obj_id: Optional[str] = None, name: str = "Unknown Item",
                 stackable: bool = False):
        self.obj_id = obj_id if obj_id else f"item_{uuid.uuid4().hex[:8]}"
        self.name = name
        self.stackable = stackable

    def __repr__(self) -> str:
        return f"Item(obj_id={self.obj_id!r}, name={self.name!r}, stackable={self.stackable})"
