from src.services.order_summary_service import OrderSummaryService, calculate_totals

__all__ = [
    "OrderSummaryService",
    "calculate_totals"
]
