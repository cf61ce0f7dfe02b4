"""Dependency injection for FastAPI endpoints"""

from fastapi import Request

from boleto_gateway.config import settings
from boleto_gateway.domain.fields import FactorMode
from boleto_gateway.domain.models import BankLayout


def get_request_id(request: Request) -> str:
    """Extract request ID from request state"""
    return getattr(request.state, "request_id", "unknown")


def get_layout() -> BankLayout:
    """Provide the configured bank layout"""
    return settings.layout()


def get_factor_mode() -> FactorMode:
    """Provide the configured due-date factor mode"""
    return settings.due_date_factor_mode
