import pytest

from models.capital import CAPITALS, DISTANCES, get_all_capitals, get_distance_between_capitals
from models.transport import (
    EMISSION_FACTORS,
    TRANSPORT_TYPES,
    get_all_emission_factors,
    get_emission_factor,
    get_human_respiration_factor,
    get_transport_icon,
    get_transport_name,
    get_transport_name_with_icon,
    is_known_transport
)


class TestTransportCatalog:

    def test_every_transport_has_a_factor(self):
        assert {t.id for t in TRANSPORT_TYPES} == set(EMISSION_FACTORS)
        assert all(factor >= 0 for factor in EMISSION_FACTORS.values())

    def test_factors(self):
        assert get_emission_factor('car') == 0.192
        assert get_emission_factor('walking') == 0
        assert get_emission_factor('hoverboard') == 0
        assert get_human_respiration_factor() == 0.0083

    def test_tables_are_read_only(self):
        with pytest.raises(TypeError):
            get_all_emission_factors()['car'] = 1
        with pytest.raises(AttributeError):
            TRANSPORT_TYPES[0].icon = 'x'

    def test_names_and_icons(self):
        assert get_transport_name('bus') == 'Bus'
        assert get_transport_icon('train') == '🚂'
        assert get_transport_name_with_icon('car') == '🚗 Car (Gasoline)'

    def test_unknown_transport(self):
        assert not is_known_transport('hoverboard')
        assert get_transport_name('hoverboard') == 'hoverboard'
        assert get_transport_icon('hoverboard') == ''
        assert get_transport_name_with_icon('hoverboard') == 'hoverboard'


class TestCapitalDistances:

    def test_capitals_sorted(self):
        capitals = get_all_capitals()
        assert capitals == sorted(CAPITALS)
        assert len(capitals) == len(set(capitals))

    def test_table_only_names_known_capitals(self):
        for pair in DISTANCES:
            assert pair <= set(CAPITALS)

    def test_lookup(self):
        assert get_distance_between_capitals('São Paulo', 'Rio de Janeiro') == 429
        assert get_distance_between_capitals('Rio de Janeiro', 'São Paulo') == 429

    def test_same_city_is_zero(self):
        assert get_distance_between_capitals('Brasília', 'Brasília') == 0

    def test_unknown_pair(self):
        assert get_distance_between_capitals('Fortaleza', 'Porto Alegre') is None
        assert get_distance_between_capitals('Lisbon', 'São Paulo') is None
