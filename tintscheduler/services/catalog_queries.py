"""
Read-only queries over the reference catalog.
"""

from typing import Any, Dict, List, Optional

from ..catalog import Catalog, Service, ServicePackage, Technician
from ..domain.exceptions import NotFoundError


class CatalogService:
    """Search and lookup helpers for services, packages, technicians and vehicles."""

    def __init__(self, catalog: Catalog) -> None:
        self._catalog = catalog

    @staticmethod
    def _matches(item: Service | ServicePackage, search: Optional[str], tag: Optional[str]) -> bool:
        if search:
            needle = search.lower()
            if needle not in item.name.lower() and needle not in item.description.lower():
                return False
        if tag and tag not in item.tags:
            return False
        return True

    # ------------------------------------------------------------------
    # Services and packages
    # ------------------------------------------------------------------

    def list_services(self, search: Optional[str] = None, tag: Optional[str] = None) -> List[Service]:
        """Services whose name or description contains ``search`` and carry ``tag``."""
        return [s for s in self._catalog.services if self._matches(s, search, tag)]

    def list_tags(self) -> List[str]:
        return list(self._catalog.tags)

    def list_packages(
        self,
        search: Optional[str] = None,
        tag: Optional[str] = None,
    ) -> List[Dict[str, Any]]:
        """
        Packages matching the filters, each with a summary of its included
        services. Optional (not included) services are left out.
        """
        results: List[Dict[str, Any]] = []

        for package in self._catalog.packages:
            if not self._matches(package, search, tag):
                continue

            included = [
                self._catalog.find_service(ref.service_id)
                for ref in package.services
                if ref.is_included
            ]
            results.append({"package": package, "services": included})

        return results

    def get_package(self, package_id: str) -> Dict[str, Any]:
        """
        A package with every service detailed, including optional ones.

        Raises:
            NotFoundError: If the package id is unknown
        """
        package = self._catalog.find_package(package_id)
        if package is None:
            raise NotFoundError(f"Package with ID {package_id} not found")

        services = [
            {
                "service": self._catalog.find_service(ref.service_id),
                "is_included": ref.is_included,
            }
            for ref in package.services
        ]
        return {"package": package, "services": services}

    # ------------------------------------------------------------------
    # Technicians
    # ------------------------------------------------------------------

    def list_technicians(self) -> List[Technician]:
        return list(self._catalog.technicians)

    # ------------------------------------------------------------------
    # Vehicles
    # ------------------------------------------------------------------

    def vehicle_years(self) -> List[str]:
        return list(self._catalog.vehicles.years)

    def vehicle_makes(self, year: Optional[str] = None) -> List[str]:
        """Makes, optionally only those offered in ``year``; an unknown year yields []."""
        vehicles = self._catalog.vehicles
        if not year:
            return [make.name for make in vehicles.makes]
        if year not in vehicles.years:
            return []
        return [make.name for make in vehicles.makes if year in make.years]

    def vehicle_models(self, year: Optional[str] = None, make: Optional[str] = None) -> List[str]:
        """
        Models filtered by year and/or make.

        Filter values that are not in the catalog are ignored rather than
        emptying the result.
        """
        vehicles = self._catalog.vehicles
        models = list(vehicles.models)

        if year and year in vehicles.years:
            models = [model for model in models if year in model.years]

        known_makes = {m.name for m in vehicles.makes}
        if make and make in known_makes:
            models = [model for model in models if model.make == make]

        return [model.name for model in models]

    def vehicle_types(self) -> List[str]:
        return list(self._catalog.vehicles.types)
