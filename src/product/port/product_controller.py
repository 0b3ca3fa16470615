"""Product controller."""

from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from src.product.domain.stock_status import LOW_STOCK_THRESHOLD, StockStatusFilter
from src.product.port.product_schema import (
    LowStockResponse,
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
    ProductStatsResponse,
    ProductUpdateRequest,
    SellRequest,
    SellResponse,
    SupplierRefResponse,
)
from src.product.use_case.product_use_case import (
    LOW_STOCK_LIMIT_DEFAULT,
    CreateProductUseCase,
    DeleteProductUseCase,
    GetProductUseCase,
    ListProductsUseCase,
    ProductStatsUseCase,
    UpdateProductUseCase,
)
from src.product.use_case.sell_product_use_case import SellProductUseCase
from src.shared.auth.current_user_info import CurrentUserInfo
from src.shared.logging.loguru_io import Logger
from src.shared.service.current_user_service import get_current_user_info


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_product(
    request: ProductCreateRequest,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: CreateProductUseCase = Depends(CreateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.create(
        user_id=current_user.user_id,
        name=request.name,
        price=request.price,
        stock_quantity=request.stock_quantity,
        supplier_id=request.supplier_id,
    )
    return ProductResponse.from_entity(product)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_products(
    search: Optional[str] = None,
    stock_status: StockStatusFilter = StockStatusFilter.ALL,
    supplier_id: Optional[int] = None,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> ProductListResponse:
    products = await use_case.list_products(
        user_id=current_user.user_id,
        search=search,
        stock_status=stock_status,
        supplier_id=supplier_id,
    )
    return ProductListResponse(products=[ProductResponse.from_entity(p) for p in products])


@router.get('/stats', status_code=status.HTTP_200_OK)
@Logger.io
async def get_product_stats(
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: ProductStatsUseCase = Depends(ProductStatsUseCase.depends),
) -> ProductStatsResponse:
    stats = await use_case.stats(user_id=current_user.user_id)
    return ProductStatsResponse(
        total_products=stats.total_products,
        total_units=stats.total_units,
        total_value=stats.total_value,
        low_stock_count=stats.low_stock_count,
        out_of_stock_count=stats.out_of_stock_count,
    )


@router.get('/low-stock', status_code=status.HTTP_200_OK)
@Logger.io
async def list_low_stock_products(
    limit: int = Query(LOW_STOCK_LIMIT_DEFAULT, ge=1, le=100),
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> LowStockResponse:
    products = await use_case.low_stock(user_id=current_user.user_id, limit=limit)
    return LowStockResponse(
        products=[ProductResponse.from_entity(p) for p in products],
        threshold=LOW_STOCK_THRESHOLD,
    )


@router.get('/suppliers', status_code=status.HTTP_200_OK)
@Logger.io
async def list_product_suppliers(
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: ListProductsUseCase = Depends(ListProductsUseCase.depends),
) -> List[SupplierRefResponse]:
    suppliers = await use_case.suppliers(user_id=current_user.user_id)
    return [SupplierRefResponse(id=s.id, name=s.name) for s in suppliers]


@router.get('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_product(
    product_id: int,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: GetProductUseCase = Depends(GetProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.get_by_id(product_id=product_id, user_id=current_user.user_id)
    return ProductResponse.from_entity(product)


@router.put('/{product_id}', status_code=status.HTTP_200_OK)
@router.patch('/{product_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_product(
    product_id: int,
    request: ProductUpdateRequest,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: UpdateProductUseCase = Depends(UpdateProductUseCase.depends),
) -> ProductResponse:
    product = await use_case.update(
        product_id=product_id,
        user_id=current_user.user_id,
        **request.model_dump(exclude_unset=True),
    )
    return ProductResponse.from_entity(product)


@router.delete('/{product_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_product(
    product_id: int,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: DeleteProductUseCase = Depends(DeleteProductUseCase.depends),
):
    await use_case.delete(product_id=product_id, user_id=current_user.user_id)
    return None


@router.post('/{product_id}/sell', status_code=status.HTTP_200_OK)
@Logger.io
async def sell_product(
    product_id: int,
    request: SellRequest,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: SellProductUseCase = Depends(SellProductUseCase.depends),
) -> SellResponse:
    result = await use_case.sell(
        product_id=product_id, user_id=current_user.user_id, quantity=request.quantity
    )
    return SellResponse(
        product=ProductResponse.from_entity(result.product),
        sold=result.sold,
        total_amount=result.total_amount,
        transaction_id=result.transaction_id,
    )
