from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel


class CashFlowPointResponse(BaseModel):
    name: str
    month: str
    entrada: float
    saida: float


class SeriesPointResponse(BaseModel):
    name: str
    value: float


class RecentSaleResponse(BaseModel):
    id: str
    client_name: Optional[str] = None
    seller_name: Optional[str] = None
    sold_at: datetime
    sold_at_display: str
    total: float
    total_display: str


class DashboardResponse(BaseModel):
    cash_flow: List[CashFlowPointResponse]
    expenses_by_category: List[SeriesPointResponse]
    quarterly_profit: List[SeriesPointResponse]
    stock_turnover: List[SeriesPointResponse]
    recent_sales: List[RecentSaleResponse]
    seller_performance: List[SeriesPointResponse]
