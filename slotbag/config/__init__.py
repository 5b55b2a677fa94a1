"""
Initializes the config package, making all settings available for direct import.
This allows other modules to use `from slotbag.config import SETTING_NAME` without
knowing which specific file the setting is in.
"""

from .config_display import *
from .config_inventory import *
from .config_logging import *
