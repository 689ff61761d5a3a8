from dataclasses import dataclass
from types import MappingProxyType

WALKING = 'walking'

# Emission factors in kg CO2 per passenger per km
EMISSION_FACTORS = MappingProxyType({
    # Land
    'car': 0.192,            # petrol car, average occupancy 1.5
    'car_electric': 0.05,
    'motorcycle': 0.113,
    'bus': 0.089,
    'train': 0.014,          # electric train
    WALKING: 0,              # respiration only

    # Air
    'plane_domestic': 0.255,
    'plane_international': 0.195,

    # Water
    'ship': 0.019,
    'ferry': 0.018
})

# ~1 kg CO2 exhaled per day, walking ~120 km per day at 5 km/h
HUMAN_RESPIRATION_FACTOR = 0.0083


@dataclass(frozen=True)
class TransportType:
    id: str
    display_name: str
    icon: str

    def to_dict(self):
        return {
            'id': self.id,
            'name': self.display_name,
            'icon': self.icon,
            'emission_factor': get_emission_factor(self.id)
        }


TRANSPORT_TYPES = (
    TransportType('car', 'Car (Gasoline)', '🚗'),
    TransportType('car_electric', 'Electric Car', '🚙'),
    TransportType('motorcycle', 'Motorcycle', '🏍️'),
    TransportType('bus', 'Bus', '🚌'),
    TransportType('train', 'Train', '🚂'),
    TransportType(WALKING, 'On Foot', '🚶'),
    TransportType('plane_domestic', 'Plane (Domestic Flight)', '✈️'),
    TransportType('plane_international', 'Plane (International Flight)', '🛫'),
    TransportType('ship', 'Ship/Cruise', '🚢'),
    TransportType('ferry', 'Ferry', '⛴️'),
)

_TRANSPORTS_BY_ID = MappingProxyType({t.id: t for t in TRANSPORT_TYPES})


def get_emission_factor(transport_id):
    """Emission factor for a transport type, 0 when the id is unknown."""
    return EMISSION_FACTORS.get(transport_id, 0)


def get_human_respiration_factor():
    return HUMAN_RESPIRATION_FACTOR


def get_all_emission_factors():
    return EMISSION_FACTORS


def get_transport_types():
    return TRANSPORT_TYPES


def is_known_transport(transport_id):
    return transport_id in _TRANSPORTS_BY_ID


def get_transport_name(transport_id):
    transport = _TRANSPORTS_BY_ID.get(transport_id)
    return transport.display_name if transport else transport_id


def get_transport_icon(transport_id):
    transport = _TRANSPORTS_BY_ID.get(transport_id)
    return transport.icon if transport else ''


def get_transport_name_with_icon(transport_id):
    """Display label such as "🚗 Car (Gasoline)"; unknown ids pass through."""
    transport = _TRANSPORTS_BY_ID.get(transport_id)
    return f"{transport.icon} {transport.display_name}" if transport else transport_id
