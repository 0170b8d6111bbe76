"""
Page navigation state for the viewer.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Pagination:
    """
    Page count of an open document.

    Attributes:
        page_count: Total number of pages.
    """

    page_count: int

    def __post_init__(self):
        if self.page_count < 1:
            raise ValueError(f"page_count must be positive, got {self.page_count}")

    @property
    def has_navigation(self) -> bool:
        """Navigation controls are only shown for multi-page documents."""
        return self.page_count > 1
