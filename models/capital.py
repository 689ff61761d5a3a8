from types import MappingProxyType

CAPITALS = (
    'São Paulo',
    'Rio de Janeiro',
    'Belo Horizonte',
    'Brasília',
    'Curitiba',
    'Porto Alegre',
    'Florianópolis',
    'Salvador',
    'Vitória',
    'Goiânia',
    'Recife',
    'Fortaleza'
)

# Road distances in km. Pairs are unordered; a missing pair means no known route.
_ROAD_DISTANCES_KM = (
    ('São Paulo', 'Rio de Janeiro', 429),
    ('São Paulo', 'Belo Horizonte', 586),
    ('São Paulo', 'Brasília', 1015),
    ('São Paulo', 'Curitiba', 408),
    ('São Paulo', 'Porto Alegre', 1109),
    ('São Paulo', 'Florianópolis', 705),
    ('São Paulo', 'Salvador', 1962),
    ('São Paulo', 'Vitória', 882),
    ('São Paulo', 'Goiânia', 926),
    ('Rio de Janeiro', 'Belo Horizonte', 434),
    ('Rio de Janeiro', 'Brasília', 1148),
    ('Rio de Janeiro', 'Curitiba', 852),
    ('Rio de Janeiro', 'Porto Alegre', 1553),
    ('Rio de Janeiro', 'Florianópolis', 1144),
    ('Rio de Janeiro', 'Salvador', 1649),
    ('Rio de Janeiro', 'Vitória', 521),
    ('Belo Horizonte', 'Brasília', 716),
    ('Belo Horizonte', 'Salvador', 1372),
    ('Belo Horizonte', 'Vitória', 524),
    ('Brasília', 'Goiânia', 209),
    ('Brasília', 'Salvador', 1446),
    ('Curitiba', 'Florianópolis', 300),
    ('Curitiba', 'Porto Alegre', 711),
    ('Florianópolis', 'Porto Alegre', 476),
    ('Salvador', 'Recife', 839),
    ('Salvador', 'Fortaleza', 1389),
    ('Recife', 'Fortaleza', 800),
)

DISTANCES = MappingProxyType({
    frozenset((origin, destination)): km
    for origin, destination, km in _ROAD_DISTANCES_KM
})


def get_all_capitals():
    return sorted(CAPITALS)


def get_distance_between_capitals(origin, destination):
    """Road distance in km between two capitals.

    Returns 0 when both are the same city and None when no route is known.
    """
    if origin == destination:
        return 0
    return DISTANCES.get(frozenset((origin, destination)))
