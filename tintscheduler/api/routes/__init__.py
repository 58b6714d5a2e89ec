from .scheduling import router as scheduling_router
from .services import router as services_router
from .technicians import router as technicians_router
from .vehicles import router as vehicles_router

__all__ = ["scheduling_router", "services_router", "technicians_router", "vehicles_router"]
