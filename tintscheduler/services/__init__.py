"""
Service layer helpers that orchestrate the catalog and domain logic.
"""

from .catalog_queries import CatalogService
from .scheduling import SchedulingService, split_service_ids

__all__ = ["CatalogService", "SchedulingService", "split_service_ids"]
