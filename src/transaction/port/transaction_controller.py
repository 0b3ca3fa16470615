"""Transaction controller: read-only sales history and reports."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, status

from src.shared.auth.current_user_info import CurrentUserInfo
from src.shared.logging.loguru_io import Logger
from src.shared.service.current_user_service import get_current_user_info
from src.transaction.domain.period import Period, resolve_bounded_range, resolve_range
from src.transaction.domain.value_objects import TransactionFilter
from src.transaction.port.transaction_schema import (
    DailySalesListResponse,
    DailySalesResponse,
    PeriodResponse,
    SalesReportResponse,
    TransactionListResponse,
    TransactionResponse,
    TransactionStatsResponse,
)
from src.transaction.use_case.transaction_use_case import (
    RECENT_LIMIT_DEFAULT,
    RECENT_LIMIT_MAX,
    GetTransactionUseCase,
    ListTransactionsUseCase,
    SalesReportUseCase,
)


router = APIRouter()


@router.get('', status_code=status.HTTP_200_OK)
@Logger.io
async def list_transactions(
    period: Optional[Period] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    search: Optional[str] = None,
    product_id: Optional[int] = None,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: ListTransactionsUseCase = Depends(ListTransactionsUseCase.depends),
) -> TransactionListResponse:
    transaction_filter = TransactionFilter(
        user_id=current_user.user_id,
        date_range=resolve_range(period, start_date, end_date),
        search=search,
        product_id=product_id,
    )
    transactions = await use_case.list_transactions(transaction_filter)
    return TransactionListResponse(
        transactions=[TransactionResponse.from_entity(t) for t in transactions]
    )


@router.get('/stats', status_code=status.HTTP_200_OK)
@Logger.io
async def get_transaction_stats(
    period: Optional[Period] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: SalesReportUseCase = Depends(SalesReportUseCase.depends),
) -> TransactionStatsResponse:
    stats = await use_case.stats(
        user_id=current_user.user_id,
        date_range=resolve_range(period, start_date, end_date),
    )
    return TransactionStatsResponse.from_stats(stats)


@router.get('/daily-sales', status_code=status.HTTP_200_OK)
@Logger.io
async def get_daily_sales(
    period: Optional[Period] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: SalesReportUseCase = Depends(SalesReportUseCase.depends),
) -> DailySalesListResponse:
    date_range = resolve_bounded_range(period, start_date, end_date)
    daily_sales = await use_case.daily_sales(user_id=current_user.user_id, date_range=date_range)
    return DailySalesListResponse(
        daily_sales=[DailySalesResponse.from_daily(d) for d in daily_sales],
        period=PeriodResponse.from_range(date_range),
    )


@router.get('/recent', status_code=status.HTTP_200_OK)
@Logger.io
async def list_recent_transactions(
    limit: int = Query(RECENT_LIMIT_DEFAULT, ge=1, le=RECENT_LIMIT_MAX),
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: ListTransactionsUseCase = Depends(ListTransactionsUseCase.depends),
) -> TransactionListResponse:
    transactions = await use_case.recent(user_id=current_user.user_id, limit=limit)
    return TransactionListResponse(
        transactions=[TransactionResponse.from_entity(t) for t in transactions]
    )


@router.get('/report', status_code=status.HTTP_200_OK)
@Logger.io
async def get_sales_report(
    period: Optional[Period] = None,
    start_date: Optional[str] = None,
    end_date: Optional[str] = None,
    search: Optional[str] = None,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: SalesReportUseCase = Depends(SalesReportUseCase.depends),
) -> SalesReportResponse:
    report = await use_case.report(
        user_id=current_user.user_id,
        date_range=resolve_range(period, start_date, end_date),
        search=search,
    )
    return SalesReportResponse(
        transactions=[TransactionResponse.from_entity(t) for t in report.transactions],
        stats=TransactionStatsResponse.from_stats(report.stats),
        daily_sales=[DailySalesResponse.from_daily(d) for d in report.daily_sales],
        period=PeriodResponse.from_range(report.period),
    )


@router.get('/{transaction_id}', status_code=status.HTTP_200_OK)
@Logger.io
async def get_transaction(
    transaction_id: int,
    current_user: CurrentUserInfo = Depends(get_current_user_info),
    use_case: GetTransactionUseCase = Depends(GetTransactionUseCase.depends),
) -> TransactionResponse:
    transaction = await use_case.get_by_id(
        transaction_id=transaction_id, user_id=current_user.user_id
    )
    return TransactionResponse.from_entity(transaction)
