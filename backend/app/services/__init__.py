"""
StockSense Services

Service layer for the dashboard: market data, indicators, news,
chat, reports and user accounts. Each service has a defined interface
(contract) and implementation.
"""

from app.services.base import BaseService, ServiceError

__all__ = ["BaseService", "ServiceError"]
