# slotbag/config/config_inventory.py
"""
Configuration for inventory sizing and slot-usage display.
"""

# --- Capacity ---
DEFAULT_INVENTORY_CAPACITY = 10 # Slots in an inventory built without an explicit size

# --- Slot usage coloring (percent of capacity in use) ---
SLOT_WARNING_PERCENT = 75
SLOT_CRITICAL_PERCENT = 90
