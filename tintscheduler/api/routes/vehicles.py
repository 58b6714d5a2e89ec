"""Vehicle lookup router - years, makes, models and types"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...services.catalog_queries import CatalogService
from ..dependencies import get_catalog_service

router = APIRouter(prefix="/vehicles", tags=["vehicles"])


@router.get("/years", response_model=list[str])
def get_years(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.vehicle_years()


@router.get("/makes", response_model=list[str])
def get_makes(
    year: Optional[str] = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return catalog.vehicle_makes(year)


@router.get("/models", response_model=list[str])
def get_models(
    year: Optional[str] = Query(None),
    make: Optional[str] = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
):
    return catalog.vehicle_models(year, make)


@router.get("/types", response_model=list[str])
def get_types(catalog: CatalogService = Depends(get_catalog_service)):
    return catalog.vehicle_types()
