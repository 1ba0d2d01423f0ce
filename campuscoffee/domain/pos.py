"""Closed enumerations describing a point of sale."""

from enum import Enum


class PosType(str, Enum):
    CAFE = "CAFE"
    VENDING_MACHINE = "VENDING_MACHINE"
    BAKERY = "BAKERY"
    CAFETERIA = "CAFETERIA"


class CampusType(str, Enum):
    MAIN = "MAIN"
    ZAPF = "ZAPF"
    WITTELSBACHERRING = "WITTELSBACHERRING"
