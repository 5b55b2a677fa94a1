# slotbag/utils/text_formatter.py
from slotbag.config import FORMAT_CODES

def remove_format_codes(text: str) -> str:
    """Strips [[CODE]] markup, leaving the text a plain terminal can show."""
    if not text:
        return ""
    result = text
    for code in FORMAT_CODES:
        result = result.replace(code, "")
    return result
