"""Service catalog router - services, tags and packages"""

from typing import Optional

from fastapi import APIRouter, Depends, Query

from ...services.catalog_queries import CatalogService
from ..dependencies import get_catalog_service
from ..schemas import (
    PackageDetailResponse,
    PackageResponse,
    PackageServiceDetail,
    ServiceResponse,
)

router = APIRouter(prefix="/services", tags=["services"])


@router.get("", response_model=list[ServiceResponse])
def list_services(
    search: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Get list of individual services"""
    return [ServiceResponse.from_service(s) for s in catalog.list_services(search, tag)]


@router.get("/tags", response_model=list[str])
def list_tags(catalog: CatalogService = Depends(get_catalog_service)):
    """Get list of service tags for filtering"""
    return catalog.list_tags()


@router.get("/packages", response_model=list[PackageResponse])
def list_packages(
    search: Optional[str] = Query(None),
    tag: Optional[str] = Query(None),
    catalog: CatalogService = Depends(get_catalog_service),
):
    """Get list of service packages with their included services"""
    return [
        PackageResponse.from_package(entry["package"], entry["services"])
        for entry in catalog.list_packages(search, tag)
    ]


@router.get("/packages/{package_id}", response_model=PackageDetailResponse)
def get_package(package_id: str, catalog: CatalogService = Depends(get_catalog_service)):
    """Get package details by id, including optional services"""
    detail = catalog.get_package(package_id)
    package = detail["package"]

    return PackageDetailResponse(
        id=package.id,
        name=package.name,
        description=package.description,
        totalPrice=package.total_price,
        estimatedTime=package.estimated_time,
        tags=list(package.tags),
        services=[
            PackageServiceDetail(
                **ServiceResponse.from_service(entry["service"]).model_dump(),
                isIncluded=entry["is_included"],
            )
            for entry in detail["services"]
        ],
    )
