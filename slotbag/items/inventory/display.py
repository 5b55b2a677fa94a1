# slotbag/items/inventory/display.py
from typing import TYPE_CHECKING, cast
from slotbag.config import (
    FORMAT_CATEGORY, FORMAT_HIGHLIGHT, FORMAT_RESET, FORMAT_ERROR,
    SLOT_WARNING_PERCENT, SLOT_CRITICAL_PERCENT
)
from slotbag.utils.text_formatter import remove_format_codes

if TYPE_CHECKING:
    from slotbag.items.inventory.core import Inventory

class InventoryDisplayMixin:
    """Mixin for generating text representations of the inventory."""

    def __str__(self) -> str:
        inventory = cast('Inventory', self)

        lines = [f" -Used {inventory.utilized_slots()} of {inventory.total_slots()} slots\n"]
        for stack in inventory.slots:
            lines.append(f"  {stack}\n")
        return "".join(lines)

    def list_items(self, plain: bool = False) -> str:
        """Colored slot listing. Needs ItemStack slots for the item names."""
        # Cast self to Inventory to satisfy static analysis
        inventory = cast('Inventory', self)

        if inventory.is_empty():
            text = f"{FORMAT_CATEGORY}Your inventory is empty.{FORMAT_RESET}"
            return remove_format_codes(text) if plain else text

        result = []
        for stack in inventory.slots:
            if stack.permits_stacking() and stack.size() > 1:
                item_text = f"- {FORMAT_HIGHLIGHT}{stack.item.name}{FORMAT_RESET} (x{stack.size()})"
            else:
                item_text = f"- {FORMAT_HIGHLIGHT}{stack.item.name}{FORMAT_RESET}"
            result.append(item_text)

        used_slots = inventory.utilized_slots()
        slot_percent = (used_slots / inventory.total_slots()) * 100

        if slot_percent >= SLOT_CRITICAL_PERCENT:
            slot_text = f"{FORMAT_ERROR}{used_slots}/{inventory.total_slots()}{FORMAT_RESET}"
        elif slot_percent >= SLOT_WARNING_PERCENT:
            slot_text = f"{FORMAT_HIGHLIGHT}{used_slots}/{inventory.total_slots()}{FORMAT_RESET}"
        else:
            slot_text = f"{used_slots}/{inventory.total_slots()}"

        slot_info = f"{FORMAT_CATEGORY}Slots used:{FORMAT_RESET} {slot_text}"

        text = "\n".join(result) + f"\n\n{slot_info}"
        return remove_format_codes(text) if plain else text
