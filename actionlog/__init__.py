"""
actionlog: extract firewall connection events from log trees into CSV.
"""

__version__ = "0.1.0"
