from enum import Enum


class ActionStatus(str, Enum):
    unselected = "unselected"
    partial = "partial"
    selected = "selected"
