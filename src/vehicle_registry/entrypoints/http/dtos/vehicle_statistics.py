from datetime import datetime

from pydantic import BaseModel, Field


class VehicleStatisticsDTO(BaseModel):
    total_count: int = Field(description="Number of vehicles in the registry", examples=[50])
    generated_at: datetime = Field(description="UTC timestamp of the count")
