"""
USA Number Formatter.
Derives standard renderings of a US phone number and lets the user pick
and copy one.
"""

__version__ = "1.0.0"
