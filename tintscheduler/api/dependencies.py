"""Dependency providers for the API routers"""

from fastapi import Request

from ..services.catalog_queries import CatalogService
from ..services.scheduling import SchedulingService


def get_scheduling_service(request: Request) -> SchedulingService:
    """Dependency injection for SchedulingService"""
    return request.app.state.scheduling_service


def get_catalog_service(request: Request) -> CatalogService:
    """Dependency injection for CatalogService"""
    return request.app.state.catalog_service
