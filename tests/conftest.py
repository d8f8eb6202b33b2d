import json

import pytest


def square(min_x, min_y, max_x, max_y):
    return [[min_x, min_y], [max_x, min_y], [max_x, max_y], [min_x, max_y], [min_x, min_y]]


def make_feature(ring_lists, iso_a2='US', adm0_a3='USA', iso_3166_2='US-KS',
                 region_code='US-MW', cont_code='NA', multi=False):
    if multi:
        geometry = {'type': 'MultiPolygon', 'coordinates': ring_lists}
    else:
        geometry = {'type': 'Polygon', 'coordinates': ring_lists}
    return {
        'type': 'Feature',
        'properties': {
            'cont_code': cont_code,
            'iso_a2': iso_a2,
            'adm0_a3': adm0_a3,
            'iso_3166_2': iso_3166_2,
            'region_code': region_code,
            'name': iso_3166_2,
        },
        'geometry': geometry,
    }


def feature_collection(*features):
    return {'type': 'FeatureCollection', 'features': list(features)}


KANSAS = make_feature([square(-102.05, 36.99, -94.59, 40.0)])
ONTARIO = make_feature(
    [square(-95.15, 41.68, -74.34, 56.86)],
    iso_a2='CA', adm0_a3='CAN', iso_3166_2='CA-ON', region_code='CA-C',
)
FRANCE_IDF = make_feature(
    [square(1.44, 48.12, 3.56, 49.24)],
    iso_a2='FR', adm0_a3='FRA', iso_3166_2='FR-J', region_code='FR-N', cont_code='EU',
)

COUNTRIES = [
    {'country_a2': 'US', 'country_a3': 'USA', 'country_name': 'United States'},
    {'country_a2': 'CA', 'country_a3': 'CAN', 'country_name': 'Canada'},
    {'country_a2': 'FR', 'country_a3': 'FRA', 'country_name': 'France'},
]
CONTINENTS = [
    {'continent_code': 'NA', 'continent_name': 'North America', 'countries': ['US', 'CA']},
    {'continent_code': 'EU', 'continent_name': 'Europe', 'countries': ['FR']},
]
REGIONS = [
    {
        'region_code': 'US-MW', 'country_a2': 'US', 'region_name': 'Midwest',
        'states': [{'state_code': 'US-KS', 'state_name': 'Kansas'}],
    },
    {
        'region_code': 'CA-C', 'country_a2': 'CA', 'region_name': 'Central Canada',
        'states': [{'state_code': 'CA-ON', 'state_name': 'Ontario'}],
    },
    {
        'region_code': 'FR-N', 'country_a2': 'FR', 'region_name': 'Nord',
        'states': [{'state_code': 'FR-J', 'state_name': 'Ile-de-France'}],
    },
]
COUNTRY_GROUPINGS = [
    {'grouping_code': 'NAFTA', 'grouping_name': 'NAFTA', 'countries': ['US', 'CA'],
     'i18n': {'es': 'TLCAN'}},
]


def write_json(root, relative, data):
    path = root / relative
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(json.dumps(data))


@pytest.fixture
def data_dir(tmp_path):
    """A full dataset layout with three boundary features."""
    write_json(tmp_path, 'states/admin1.json', feature_collection(KANSAS, ONTARIO, FRANCE_IDF))
    write_json(tmp_path, 'countries/countries.json', COUNTRIES)
    write_json(tmp_path, 'continents/continents.json', CONTINENTS)
    write_json(tmp_path, 'regions/regions.json', REGIONS)
    write_json(tmp_path, 'country-groupings/country-groupings.json', COUNTRY_GROUPINGS)
    write_json(tmp_path, 'countries/US.json', feature_collection(KANSAS))
    return tmp_path
