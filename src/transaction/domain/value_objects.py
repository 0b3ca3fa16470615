"""Value Objects for the transaction context."""

from typing import Optional

import attrs

from src.transaction.domain.period import DateRange


@attrs.define(frozen=True)
class TransactionFilter:
    user_id: int
    date_range: DateRange = attrs.field(factory=DateRange)
    search: Optional[str] = None
    product_id: Optional[int] = None

    @property
    def search_term(self) -> Optional[str]:
        term = (self.search or '').strip()
        return term or None
