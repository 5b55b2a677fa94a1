# slotbag/items/inventory/core.py
from typing import Iterator, List, Optional
from slotbag.config import DEFAULT_INVENTORY_CAPACITY
from slotbag.items.item_stack import ItemStack
from slotbag.utils.logger import Logger
from .display import InventoryDisplayMixin


class InvalidCapacityError(ValueError):
    """Raised when an inventory is created with a capacity below one slot."""
    pass


class Inventory(InventoryDisplayMixin):
    """
    An ordered collection of at most `capacity` item stacks, one per slot.

    Stacks of a stackable item type merge into the slot already holding that
    type. Every other stack takes the next free slot until the inventory is
    full. The display mixin handles the text summaries.

    Not thread-safe: callers sharing an instance between threads must hold
    their own lock around add_items and the queries.
    """

    def __init__(self, capacity: int = DEFAULT_INVENTORY_CAPACITY):
        if isinstance(capacity, bool) or not isinstance(capacity, int) or capacity <= 0:
            raise InvalidCapacityError(
                f"Inventory capacity must be a positive integer, got {capacity!r}.")
        self._capacity = capacity
        self.slots: List[ItemStack] = []

    @classmethod
    def with_default_capacity(cls) -> 'Inventory':
        return cls(DEFAULT_INVENTORY_CAPACITY)

    @staticmethod
    def merge_stacks(lhs: ItemStack, rhs: ItemStack) -> None:
        """Adds the number of items in rhs to lhs."""
        lhs.add_items(rhs.size())

    @property
    def capacity(self) -> int:
        return self._capacity

    def utilized_slots(self) -> int:
        return len(self.slots)

    def empty_slots(self) -> int:
        return self.total_slots() - self.utilized_slots()

    def total_slots(self) -> int:
        return self._capacity

    def is_full(self) -> bool:
        return self.utilized_slots() == self._capacity

    def is_empty(self) -> bool:
        return self.utilized_slots() == 0

    def find_matching_stack(self, key: ItemStack) -> Optional[ItemStack]:
        """Returns the first stored stack holding the same item type as key."""
        for stack in self.slots:
            if stack == key:
                return stack
        return None

    def count_item(self, obj_id: str) -> int:
        """Total quantity of an item type across all slots. Needs ItemStack slots."""
        return sum(stack.size() for stack in self.slots if stack.item.obj_id == obj_id)

    def add_items(self, stack: ItemStack) -> bool:
        """
        Add a stack to the inventory.

        Merges into a matching stackable slot when there is one, otherwise
        occupies a new slot if any remain. A non-stackable item type that is
        already stored still gets a second slot of its own.

        Returns True if the stack was stored or merged. On False the
        inventory is unchanged and the caller keeps the stack.
        """
        match = self.find_matching_stack(stack)

        if match is not None and match.permits_stacking():
            self.merge_stacks(match, stack)
            Logger.debug("Inventory", f"Merged {stack.size()} into '{match}'.")
            return True

        if self.utilized_slots() < self._capacity:
            self._append_slot(stack)
            return True

        Logger.debug("Inventory", f"No free slot for '{stack}' ({self._capacity} in use).")
        return False

    def _append_slot(self, stack: ItemStack) -> None:
        # No capacity or match checks; add_items does those
        self.slots.append(stack)
        Logger.debug("Inventory", f"'{stack}' placed in slot {len(self.slots)} of {self._capacity}.")

    def __len__(self) -> int:
        return self.utilized_slots()

    def __iter__(self) -> Iterator[ItemStack]:
        return iter(self.slots)

    def __contains__(self, stack: object) -> bool:
        return self.find_matching_stack(stack) is not None # type: ignore[arg-type]
