"""Enumerations shared across geoutm"""

__all__ = ['Hemisphere']

from enum import Enum


class Hemisphere(str, Enum):
    """The half of the globe a UTM coordinate is measured in"""

    NORTH = 'N'
    SOUTH = 'S'

    def __str__(self):
        return self.value
