# tests/fixtures.py
import unittest
import sys
import os
from typing import Optional

# Get the absolute path to the project root (one level up from tests/)
PROJECT_ROOT = os.path.abspath(os.path.join(os.path.dirname(__file__), '..'))

# Insert root into sys.path so we can import 'slotbag'
if PROJECT_ROOT not in sys.path:
    sys.path.insert(0, PROJECT_ROOT)

from slotbag.items.item import Item
from slotbag.items.item_stack import ItemStack
from slotbag.items.inventory import Inventory
from slotbag.utils.logger import Logger, LogLevel

class InventoryTestBase(unittest.TestCase):
    """Base class for inventory tests."""

    def setUp(self):
        """Runs before EVERY test function."""
        # Keep debug chatter out of test output
        self._saved_log_level = Logger.get_level()
        Logger.set_level(LogLevel.CRITICAL)
        self.inventory = Inventory(capacity=2)

    def tearDown(self):
        Logger.set_level(self._saved_log_level)

    def make_item(self, obj_id: str, stackable: bool = True, name: Optional[str] = None) -> Item:
        return Item(obj_id=obj_id, name=name or obj_id.title(), stackable=stackable)

    def make_stack(self, obj_id: str, quantity: int = 1, stackable: bool = True) -> ItemStack:
        return ItemStack(self.make_item(obj_id, stackable), quantity)

    def assertSlots(self, inventory: Inventory, used: int):
        """Checks the occupied/empty slot counts agree with each other."""
        self.assertEqual(inventory.utilized_slots(), used)
        self.assertEqual(inventory.empty_slots(), inventory.total_slots() - used)
