# tests/test_inventory_scenarios.py
from tests.fixtures import InventoryTestBase

class TestInventoryScenarios(InventoryTestBase):
    """End-to-end sequences on a two-slot inventory."""

    def test_resource_gathering(self):
        inv = self.inventory
        self.assertTrue(inv.add_items(self.make_stack("wood", 5)))
        self.assertSlots(inv, 1)
        self.assertTrue(inv.add_items(self.make_stack("stone", 2)))
        self.assertSlots(inv, 2)
        self.assertFalse(inv.add_items(self.make_stack("iron", 1)))
        self.assertSlots(inv, 2)
        self.assertTrue(inv.add_items(self.make_stack("wood", 3)))
        self.assertSlots(inv, 2)
        self.assertEqual(inv.find_matching_stack(self.make_stack("wood")).size(), 8)

    def test_two_swords(self):
        inv = self.inventory
        self.assertTrue(inv.add_items(self.make_stack("sword", stackable=False)))
        self.assertTrue(inv.add_items(self.make_stack("sword", stackable=False)))
        self.assertTrue(inv.is_full())
        self.assertFalse(inv.add_items(self.make_stack("potion", 3)))
        self.assertSlots(inv, 2)
