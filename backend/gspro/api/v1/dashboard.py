"""
Dashboard endpoint returning every chart series in one payload.
"""

from fastapi import APIRouter, Query

from gspro.api.dependencies import CurrentActiveUser, DatabaseSession
from gspro.core.config import settings
from gspro.schemas.dashboard import (
    CashFlowPointResponse,
    DashboardResponse,
    RecentSaleResponse,
    SeriesPointResponse,
)
from gspro.services.dashboard import DashboardService
from gspro.services.formatting import format_brl, format_datetime_br

router = APIRouter(tags=["dashboard"])


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    summary="Dashboard data",
    description=(
        "Monthly cash flow, expenses by category, quarterly profit, stock "
        "turnover, recent sales and seller performance."
    ),
)
async def get_dashboard(
    db: DatabaseSession,
    current_user: CurrentActiveUser,
    months: int = Query(default=6, ge=1, le=24),
) -> DashboardResponse:
    dashboard = await DashboardService(db).build(
        months=months,
        recent_limit=settings.recent_sales_limit,
        fast_moving_days=settings.fast_moving_days,
    )

    return DashboardResponse(
        cash_flow=[CashFlowPointResponse(**point.__dict__) for point in dashboard.cash_flow],
        expenses_by_category=[SeriesPointResponse(**point.__dict__) for point in dashboard.expenses],
        quarterly_profit=[SeriesPointResponse(**point.__dict__) for point in dashboard.profit],
        stock_turnover=[SeriesPointResponse(**point.__dict__) for point in dashboard.turnover],
        recent_sales=[
            RecentSaleResponse(
                id=sale.id,
                client_name=sale.client.name if sale.client is not None else None,
                seller_name=sale.seller.name if sale.seller is not None else None,
                sold_at=sale.sold_at,
                sold_at_display=format_datetime_br(sale.sold_at),
                total=sale.total,
                total_display=format_brl(sale.total),
            )
            for sale in dashboard.recent_sales
        ],
        seller_performance=[SeriesPointResponse(**point.__dict__) for point in dashboard.sellers],
    )
