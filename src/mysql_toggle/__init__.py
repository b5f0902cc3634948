"""
MySQL Connect Toggle: a one-button desktop utility that opens or closes a MySQL connection.
"""

__version__ = "0.1.0"
