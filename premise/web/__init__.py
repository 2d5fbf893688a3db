"""Presentation helpers."""

from premise.web.select_list import SelectListItem, from_enum

__all__ = ["SelectListItem", "from_enum"]
