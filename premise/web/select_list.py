"""
Select list helpers.

Builds option lists for dropdowns from Python enumerations.
"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Type


@dataclass
class SelectListItem:
    """One option of a select list."""

    text: str
    value: str
    selected: bool = False
    disabled: bool = False


def from_enum(enum_cls: Type[Enum]) -> List[SelectListItem]:
    """
    One item per enum member, in declaration order.

    Both the label and the value are the member name.

    Example:
        class Color(Enum):
            RED = 1
            GREEN = 2

        from_enum(Color)
        # [SelectListItem(text="RED", value="RED"), SelectListItem(text="GREEN", value="GREEN")]
    """
    return [SelectListItem(text=member.name, value=member.name) for member in enum_cls]
