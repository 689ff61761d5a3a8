import re
from dataclasses import dataclass

from config import MAX_PEOPLE
from models.capital import get_distance_between_capitals
from models.trip import TripForm

DISTANCE_UNKNOWN = 'Could not determine the distance between the selected cities.'
DISTANCE_NEGATIVE = 'Distance cannot be negative.'
SAME_CITY = 'Origin and destination cannot be the same city.'
FACTOR_NEGATIVE = 'Emission factor cannot be negative.'
MISSING_FIELDS = 'Please fill in all fields.'
TOO_FEW_PEOPLE = 'Number of people must be at least 1.'
TOO_MANY_PEOPLE = f'Number of people cannot exceed {MAX_PEOPLE}.'

# leading integer, the rest is ignored: "2.5" and 2.0 both read as 2
_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass(frozen=True)
class ValidationResult:
    is_valid: bool
    message: str = ''

    @classmethod
    def ok(cls):
        return cls(True)

    @classmethod
    def fail(cls, message):
        return cls(False, message)


def validate_calculation_inputs(distance_km, emission_factor):
    """Check a distance and emission factor before running the model.

    A zero emission factor is accepted: walking still goes through the model.
    """
    if distance_km is None:
        return ValidationResult.fail(DISTANCE_UNKNOWN)
    if distance_km < 0:
        return ValidationResult.fail(DISTANCE_NEGATIVE)
    if distance_km == 0:
        return ValidationResult.fail(SAME_CITY)
    if emission_factor is not None and emission_factor < 0:
        return ValidationResult.fail(FACTOR_NEGATIVE)
    return ValidationResult.ok()


def _clean(value):
    if value is None:
        return ''
    return str(value).strip()


def get_form_data(source):
    """Build a TripForm from a request mapping (form fields or JSON body).

    Returns None when a select is blank or the people count does not start
    with an integer. Decimal counts are truncated.
    """
    if not source:
        return None

    origin = _clean(source.get('origin'))
    destination = _clean(source.get('destination'))
    transport_id = _clean(source.get('transport'))
    if not all([origin, destination, transport_id]):
        return None

    match = _LEADING_INT.match(_clean(source.get('people')))
    if not match:
        return None
    people = int(match.group(1))

    return TripForm(
        origin=origin,
        destination=destination,
        transport_id=transport_id,
        people=people,
        distance_km=get_distance_between_capitals(origin, destination)
    )


def validate_form(form):
    if form is None:
        return ValidationResult.fail(MISSING_FIELDS)
    if form.origin == form.destination:
        return ValidationResult.fail(SAME_CITY)
    if form.distance_km is None:
        return ValidationResult.fail(DISTANCE_UNKNOWN)
    if form.people < 1:
        return ValidationResult.fail(TOO_FEW_PEOPLE)
    if form.people > MAX_PEOPLE:
        return ValidationResult.fail(TOO_MANY_PEOPLE)
    return ValidationResult.ok()
