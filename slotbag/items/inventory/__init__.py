"""
Inventory Package.
Manages item stacks, slot capacity and the inventory summary.
"""
from .core import Inventory, InvalidCapacityError
