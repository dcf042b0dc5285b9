"""Greeting service identifiers."""

from typing import NewType

UserId = NewType('UserId', int)
