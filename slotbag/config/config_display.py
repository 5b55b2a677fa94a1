# slotbag/config/config_display.py
"""
Markup codes embedded in display strings. A renderer swaps them for colors;
plain output strips them with utils.text_formatter.remove_format_codes.
"""

FORMAT_RED = "[[RED]]"
FORMAT_YELLOW = "[[YELLOW]]"
FORMAT_GREEN = "[[GREEN]]"
FORMAT_CYAN = "[[CYAN]]"
FORMAT_GRAY = "[[GRAY]]"
FORMAT_RESET = "[[/]]"

# --- Semantic aliases ---
FORMAT_ERROR = FORMAT_RED
FORMAT_TITLE = FORMAT_YELLOW
FORMAT_HIGHLIGHT = FORMAT_GREEN
FORMAT_CATEGORY = FORMAT_CYAN

FORMAT_CODES = (
    FORMAT_RED, FORMAT_YELLOW, FORMAT_GREEN, FORMAT_CYAN, FORMAT_GRAY, FORMAT_RESET
)
