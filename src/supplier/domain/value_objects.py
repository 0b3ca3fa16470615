"""Value Objects for the supplier context."""

import attrs


@attrs.define(frozen=True)
class SupplierRef:
    """Id and name pair for dropdowns and product lookups."""

    id: int
    name: str
