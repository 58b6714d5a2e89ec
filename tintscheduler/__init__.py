"""
tintscheduler - appointment scheduling backend for a vehicle-tinting shop.
"""

__version__ = "0.1.0"
