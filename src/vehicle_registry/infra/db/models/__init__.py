from vehicle_registry.infra.db.models.base import Base
from vehicle_registry.infra.db.models.vehicle import VehicleRow

__all__ = ["Base", "VehicleRow"]
