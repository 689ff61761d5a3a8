import math
from decimal import Decimal, ROUND_HALF_UP, localcontext

from models.transport import HUMAN_RESPIRATION_FACTOR, WALKING
from models.trip import EmissionBreakdown

# kg CO2 absorbed by one tree in a year
CO2_PER_TREE_PER_YEAR = 22


def _out_of_range(distance_km, transport_factor, people_count, human_factor):
    if distance_km is None or distance_km <= 0 or people_count < 1:
        return True
    return transport_factor < 0 or human_factor < 0


def compute_total_emission(distance_km, transport_factor, people_count=1, transport_id='',
                           human_factor=HUMAN_RESPIRATION_FACTOR):
    """Total CO2 in kg for the whole group.

    The transport emission is shared between travellers while every traveller
    respires on their own, so the first term is divided by the head count and
    the second multiplied by it. Walking reports no emission at all.
    """
    if _out_of_range(distance_km, transport_factor, people_count, human_factor):
        return 0
    if transport_id == WALKING:
        return 0

    transport_emission = (distance_km * transport_factor) / people_count
    human_emission = distance_km * human_factor * people_count
    return transport_emission + human_emission


def compute_detailed_emission_per_person(distance_km, transport_factor, people_count=1, transport_id='',
                                         human_factor=HUMAN_RESPIRATION_FACTOR):
    """Split of one traveller's emission into transport and respiration."""
    if _out_of_range(distance_km, transport_factor, people_count, human_factor):
        return EmissionBreakdown()
    if transport_id == WALKING:
        return EmissionBreakdown()

    transport_per_person = (distance_km * transport_factor) / people_count
    # not scaled by head count: one person's respiration
    human_per_person = distance_km * human_factor
    return EmissionBreakdown(
        transport_per_person=transport_per_person,
        human_per_person=human_per_person,
        total_per_person=transport_per_person + human_per_person
    )


def compute_trip(trip):
    """Run both calculations for a TripInput. Returns (total, breakdown)."""
    args = (trip.distance_km, trip.transport_emission_factor, trip.people_count,
            trip.transport_id, trip.human_respiration_factor)
    return compute_total_emission(*args), compute_detailed_emission_per_person(*args)


def format_emission(value, decimals=2):
    if value == 0:
        return '0 kg CO₂'
    # round on the decimal text so 82.345 gives 82.35
    exact = Decimal(str(value))
    if not exact.is_finite():
        return f"{value} kg CO₂"
    with localcontext() as ctx:
        ctx.prec = max(28, exact.adjusted() + decimals + 2)
        rounded = exact.quantize(Decimal(1).scaleb(-decimals), rounding=ROUND_HALF_UP)
    return f"{rounded} kg CO₂"


def format_distance(value):
    if value is None or value <= 0:
        return '0 km'
    return f"{value} km"


def estimate_trees_to_offset(emission_kg):
    return math.ceil(emission_kg / CO2_PER_TREE_PER_YEAR)
