"""
kvgate - login and item storage API over a key-value store.
"""

__version__ = "0.1.0"
