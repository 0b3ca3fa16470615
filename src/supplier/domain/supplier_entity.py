"""Supplier entity."""

from datetime import datetime
from typing import Any, Optional

import attrs
from email_validator import EmailNotValidError, validate_email

from src.shared.domain.clock import utc_now
from src.shared.domain.validators import StringValidators, strip_optional_text, strip_text
from src.shared.exception.exceptions import ValidationError


def normalize_email(value: Any) -> Any:
    return value.strip().lower() if isinstance(value, str) else value


def validate_supplier_email(_instance: Any, attribute: Any, value: str) -> None:
    if not isinstance(value, str):
        raise ValidationError('Invalid email format', field=attribute.name)
    try:
        validate_email(value, check_deliverability=False)
    except EmailNotValidError:
        raise ValidationError('Invalid email format', field=attribute.name) from None


@attrs.define
class Supplier:
    user_id: int = attrs.field(validator=attrs.validators.instance_of(int))
    name: str = attrs.field(converter=strip_text, validator=StringValidators.validate_name)
    contact_person: str = attrs.field(
        converter=strip_text, validator=StringValidators.validate_name
    )
    email: str = attrs.field(converter=normalize_email, validator=validate_supplier_email)
    phone: str = attrs.field(converter=strip_text, validator=StringValidators.validate_required)
    address: str = attrs.field(default='', converter=strip_optional_text)
    created_at: datetime = attrs.field(factory=utc_now)
    updated_at: datetime = attrs.field(factory=utc_now)
    id: Optional[int] = None

    @classmethod
    def create(
        cls,
        *,
        user_id: int,
        name: str,
        contact_person: str,
        email: str,
        phone: str,
        address: Optional[str] = None,
    ) -> 'Supplier':
        now = utc_now()
        return cls(
            user_id=user_id,
            name=name,
            contact_person=contact_person,
            email=email,
            phone=phone,
            address=address or '',
            created_at=now,
            updated_at=now,
        )

    def apply_changes(self, **changes: Any) -> 'Supplier':
        provided = {key: value for key, value in changes.items() if value is not None}
        return attrs.evolve(self, updated_at=utc_now(), **provided)
