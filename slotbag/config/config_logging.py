# slotbag/config/config_logging.py
"""
Configuration for the console logger.
"""

# Minimum level printed at startup: DEBUG, INFO, WARNING, ERROR or CRITICAL
LOG_LEVEL = "WARNING"
LOG_TIME_FORMAT = "%H:%M:%S"
