from __future__ import annotations

import math
from dataclasses import dataclass


@dataclass(frozen=True)
class PaginationInfo:
    total_items: int
    remaining_items: int
    returned_items: int
    items_per_page: int
    current_page: int
    total_pages: int
    has_next_page: bool
    has_previous_page: bool

    @classmethod
    def compute(cls, total_items: int, take: int, skip: int, returned: int) -> PaginationInfo:
        """Derive page metadata from offset-pagination counts.

        Invalid windows (take <= 0 or skip < 0) describe an empty page.
        """
        if take <= 0 or skip < 0:
            return cls(
                total_items=total_items,
                remaining_items=total_items,
                returned_items=0,
                items_per_page=max(take, 0),
                current_page=1,
                total_pages=0,
                has_next_page=False,
                has_previous_page=False,
            )

        return cls(
            total_items=total_items,
            remaining_items=max(0, total_items - skip - returned),
            returned_items=returned,
            items_per_page=take,
            current_page=skip // take + 1,
            total_pages=math.ceil(total_items / take),
            has_next_page=skip + returned < total_items,
            has_previous_page=skip > 0,
        )
