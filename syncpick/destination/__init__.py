"""Destination handling package for syncpick.

Example:
    >>> from syncpick.destination import DestinationValidator
    >>> path = DestinationValidator().validate("~/backup", confirm_create=lambda p: True)
"""

from .destination_validator import DestinationValidator

__all__ = ["DestinationValidator"]
