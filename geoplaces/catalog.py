"""Read-only accessors over the continent, country, grouping and region tables.

Every accessor returns a copy, so callers can't corrupt the loaded tables.
"""

import copy


def _first(items, key, value):
    for item in items:
        if item.get(key) == value:
            return item
    return None


class Catalog:
    def __init__(self, dataset):
        self.continents = dataset.continents
        self.countries = dataset.countries
        self.country_groupings = dataset.country_groupings
        self.regions = dataset.regions

    # Continents

    def get_continents(self):
        return copy.deepcopy(self.continents)

    def get_continent_by_code(self, continent_code):
        return copy.deepcopy(_first(self.continents, 'continent_code', continent_code))

    def is_valid_continent_code(self, continent_code):
        return _first(self.continents, 'continent_code', continent_code) is not None

    # Countries

    def get_countries(self):
        return copy.deepcopy(self.countries)

    def get_country_by_alpha2(self, alpha2):
        return copy.deepcopy(_first(self.countries, 'country_a2', alpha2))

    def get_country_by_alpha3(self, alpha3):
        return self.get_country_by_alpha2(self.country_alpha3_to_alpha2(alpha3))

    def country_alpha2_to_alpha3(self, alpha2):
        country = _first(self.countries, 'country_a2', alpha2)
        return country['country_a3'] if country else None

    def country_alpha3_to_alpha2(self, alpha3):
        country = _first(self.countries, 'country_a3', alpha3)
        return country['country_a2'] if country else None

    def is_valid_country_alpha2(self, alpha2):
        return _first(self.countries, 'country_a2', alpha2) is not None

    def is_valid_country_alpha3(self, alpha3):
        return _first(self.countries, 'country_a3', alpha3) is not None

    def _countries_in(self, parent):
        if not parent or not parent.get('countries'):
            return None
        members = set(parent['countries'])
        return copy.deepcopy([c for c in self.countries if c.get('country_a2') in members])

    def get_countries_by_continent_code(self, continent_code):
        return self._countries_in(_first(self.continents, 'continent_code', continent_code))

    def get_countries_by_country_grouping_code(self, grouping_code):
        return self._countries_in(_first(self.country_groupings, 'grouping_code', grouping_code))

    # Country groupings

    def get_country_groupings(self):
        groupings = copy.deepcopy(self.country_groupings)
        for grouping in groupings:
            grouping.pop('i18n', None)
        return groupings

    def get_country_grouping_by_code(self, grouping_code):
        return copy.deepcopy(_first(self.country_groupings, 'grouping_code', grouping_code))

    def is_valid_country_grouping_code(self, grouping_code):
        return _first(self.country_groupings, 'grouping_code', grouping_code) is not None

    # Regions and states

    def get_regions(self):
        regions = copy.deepcopy(self.regions)
        for region in regions:
            region.pop('states', None)
        return regions

    def get_regions_and_states(self):
        return copy.deepcopy(self.regions)

    def get_regions_by_country_alpha2(self, alpha2):
        regions = copy.deepcopy([r for r in self.regions if r.get('country_a2') == alpha2])
        for region in regions:
            region.pop('states', None)
        return regions

    def get_regions_by_country_alpha3(self, alpha3):
        return self.get_regions_by_country_alpha2(self.country_alpha3_to_alpha2(alpha3))

    def get_region_by_code(self, region_code):
        return copy.deepcopy(_first(self.regions, 'region_code', region_code))

    def is_valid_region_code(self, region_code):
        return _first(self.regions, 'region_code', region_code) is not None

    def get_states_by_region_code(self, region_code):
        region = _first(self.regions, 'region_code', region_code)
        if region is None:
            return None
        return copy.deepcopy(region.get('states', []))

    def _find_state(self, state_code):
        for region in self.regions:
            state = _first(region.get('states') or [], 'state_code', state_code)
            if state is not None:
                return state
        return None

    def get_state_by_code(self, state_code):
        return copy.deepcopy(self._find_state(state_code))

    def is_valid_state_code(self, state_code):
        return self._find_state(state_code) is not None
