"""Supplier controller."""

from typing import List, Optional

from fastapi import APIRouter, Depends, status

from src.shared.auth.current_user_info import CurrentUserInfo
from src.shared.logging.loguru_io import Logger
from src.shared.service.current_user_service import get_current_user_info
from src.supplier.port.supplier_schema import (
    SupplierCreateRequest,
    SupplierListResponse,
    SupplierNameResponse,
    SupplierResponse,
    SupplierUpdateRequest,
)
from src.supplier.use_case.supplier_use_case import (
    CreateSupplierUseCase,
    DeleteSupplierUseCase,
    GetSupplierUseCase,
    ListSuppliersUseCase,
    UpdateSupplierUseCase,
)


router = APIRouter()


@router.post('', status_code=status.HTTP_201_CREATED)
@Logger.io
async def create_supplier(
    request: SupplierCreateRequest,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: CreateSupplierUseCase = Depends(CreateSupplierUseCase.depends),
) -> SupplierResponse:
    supplier = await use_case.create(
        user_id=current_user.user_id,
        name=request.name,
        contact_person=request.contact_person,
        email=request.email,
        phone=request.phone,
        address=request.address,
    )
    return SupplierResponse.from_entity(supplier)


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_suppliers(
    search: Optional[str] = None,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: ListSuppliersUseCase = Depends(ListSuppliersUseCase.depends),
) -> SupplierListResponse:
    suppliers = await use_case.list_suppliers(user_id=current_user.user_id, search=search)
    return SupplierListResponse(suppliers=[SupplierResponse.from_entity(s) for s in suppliers])


@router.get('/names', status_code=status.HTTP_200_OK)
@Logger.io
async def list_supplier_names(
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: ListSuppliersUseCase = Depends(ListSuppliersUseCase.depends),
) -> List[SupplierNameResponse]:
    names = await use_case.list_names(user_id=current_user.user_id)
    return [SupplierNameResponse(id=ref.id, name=ref.name) for ref in names]


@router.get('/{supplier_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_supplier(
    supplier_id: int,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: GetSupplierUseCase = Depends(GetSupplierUseCase.depends),
) -> SupplierResponse:
    supplier = await use_case.get_by_id(supplier_id=supplier_id, user_id=current_user.user_id)
    return SupplierResponse.from_entity(supplier)


@router.put('/{supplier_id}', status_code=status.HTTP_200_OK)
@router.patch('/{supplier_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def update_supplier(
    supplier_id: int,
    request: SupplierUpdateRequest,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: UpdateSupplierUseCase = Depends(UpdateSupplierUseCase.depends),
) -> SupplierResponse:
    supplier = await use_case.update(
        supplier_id=supplier_id,
        user_id=current_user.user_id,
        **request.model_dump(exclude_unset=True),
    )
    return SupplierResponse.from_entity(supplier)


@router.delete('/{supplier_id}', status_code=status.HTTP_204_NO_CONTENT)
@Logger.io
async def delete_supplier(
    supplier_id: int,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: DeleteSupplierUseCase = Depends(DeleteSupplierUseCase.depends),
):
    await use_case.delete(supplier_id=supplier_id, user_id=current_user.user_id)
    return None
