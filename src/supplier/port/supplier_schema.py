from datetime import datetime
from typing import List, Optional

from pydantic import ConfigDict

from src.shared.port.schema_types import CamelModel

from src.supplier.domain.supplier_entity import Supplier


class SupplierCreateRequest(CamelModel):
    name: str
    contact_person: str
    email: str
    phone: str
    address: Optional[str] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Acme Supply',
                'contactPerson': 'Jane Doe',
                'email': 'jane@acme.com',
                'phone': '+1 555 0100',
                'address': '1 Industrial Way',
            }
        }
    )


class SupplierUpdateRequest(CamelModel):
    name: Optional[str] = None
    contact_person: Optional[str] = None
    email: Optional[str] = None
    phone: Optional[str] = None
    address: Optional[str] = None

    model_config = ConfigDict(json_schema_extra={'example': {'phone': '+1 555 0199'}})


class SupplierResponse(CamelModel):
    id: int
    name: str
    contact_person: str
    email: str
    phone: str
    address: str
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, supplier: Supplier) -> 'SupplierResponse':
        if supplier.id is None:
            raise ValueError('Supplier ID should not be None after persistence.')

        return cls(
            id=supplier.id,
            name=supplier.name,
            contact_person=supplier.contact_person,
            email=supplier.email,
            phone=supplier.phone,
            address=supplier.address,
            created_at=supplier.created_at,
            updated_at=supplier.updated_at,
        )


class SupplierListResponse(CamelModel):
    suppliers: List[SupplierResponse]


class SupplierNameResponse(CamelModel):
    id: int
    name: str
