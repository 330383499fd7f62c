"""
Delegates App - callback registration and composition demos

Two small programs built on a reusable callback library: a bookstore
catalog that calls a delegate for every paperback book, and a pair of
message delegates that are composed and then taken apart again.
"""

__version__ = "0.1.0"
__author__ = "Delegates Team"
