from dataclasses import dataclass
from typing import Optional

from models.transport import HUMAN_RESPIRATION_FACTOR


@dataclass(frozen=True)
class TripForm:
    """Raw trip request as submitted, before any validation."""
    origin: str
    destination: str
    transport_id: str
    people: int
    distance_km: Optional[float] = None


@dataclass(frozen=True)
class TripInput:
    distance_km: float
    transport_emission_factor: float
    people_count: int = 1
    transport_id: str = ''
    human_respiration_factor: float = HUMAN_RESPIRATION_FACTOR


@dataclass(frozen=True)
class EmissionBreakdown:
    transport_per_person: float = 0
    human_per_person: float = 0
    total_per_person: float = 0
