from datetime import datetime
from decimal import Decimal
from typing import List, Optional

from pydantic import ConfigDict, Field

from src.product.domain.product_entity import Product
from src.shared.domain.validators import MAX_PRICE, MAX_QUANTITY
from src.shared.port.schema_types import CamelModel, Money


class ProductCreateRequest(CamelModel):
    name: str
    price: Decimal = Field(..., le=MAX_PRICE)
    stock_quantity: int = Field(0, strict=True, le=MAX_QUANTITY)
    supplier_id: Optional[int] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Blue Widget',
                'price': 19.99,
                'stockQuantity': 25,
                'supplierId': 1,
            }
        }
    )


class ProductUpdateRequest(CamelModel):
    name: Optional[str] = None
    price: Optional[Decimal] = Field(None, le=MAX_PRICE)
    stock_quantity: Optional[int] = Field(None, strict=True, le=MAX_QUANTITY)
    supplier_id: Optional[int] = None

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'name': 'Blue Widget XL',
                'price': 24.5,
                'stockQuantity': 40,
            }
        }
    )


class SellRequest(CamelModel):
    # No upper bound here: an oversized quantity is reported as insufficient stock
    quantity: int = Field(..., strict=True)

    model_config = ConfigDict(json_schema_extra={'example': {'quantity': 3}})


class ProductResponse(CamelModel):
    id: int
    name: str
    price: Money
    stock_quantity: int
    stock_status: str
    stock_value: Money
    supplier_id: Optional[int] = None
    supplier_name: Optional[str] = None
    created_at: datetime
    updated_at: datetime

    @classmethod
    def from_entity(cls, product: Product) -> 'ProductResponse':
        if product.id is None:
            raise ValueError('Product ID should not be None after persistence.')

        return cls(
            id=product.id,
            name=product.name,
            price=product.price,
            stock_quantity=product.stock_quantity,
            stock_status=product.stock_status.value,
            stock_value=product.stock_value,
            supplier_id=product.supplier_id,
            supplier_name=product.supplier_name,
            created_at=product.created_at,
            updated_at=product.updated_at,
        )

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'id': 1,
                'name': 'Blue Widget',
                'price': 19.99,
                'stockQuantity': 3,
                'stockStatus': 'low-stock',
                'stockValue': 59.97,
                'supplierId': 1,
                'supplierName': 'Acme Supply',
                'createdAt': '2024-03-04T10:00:00Z',
                'updatedAt': '2024-03-04T10:00:00Z',
            }
        }
    )


class ProductListResponse(CamelModel):
    products: List[ProductResponse]


class LowStockResponse(CamelModel):
    products: List[ProductResponse]
    threshold: int


class ProductStatsResponse(CamelModel):
    total_products: int
    total_units: int
    total_value: Money
    low_stock_count: int
    out_of_stock_count: int


class SupplierRefResponse(CamelModel):
    id: int
    name: str


class SellResponse(CamelModel):
    product: ProductResponse
    sold: int
    total_amount: Money
    transaction_id: int

    model_config = ConfigDict(
        json_schema_extra={
            'example': {
                'product': ProductResponse.model_config['json_schema_extra']['example'],  # type: ignore[index]
                'sold': 3,
                'totalAmount': 59.97,
                'transactionId': 42,
            }
        }
    )
