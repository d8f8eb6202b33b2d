"""Reverse geolocation: coordinates to continent, country, region and state."""

import copy
import logging
import numbers
from dataclasses import dataclass

from geoplaces.config import MODE_GEOJSON, MODE_PROPERTIES, MODE_RAW, STATE_CODE_NOT_APPLICABLE

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class InputError:
    """Returned (not raised) when a coordinate is not a number."""
    lat: object
    lng: object

    @property
    def message(self):
        return f'Wrong coordinates (lat: {self.lat},lng: {self.lng})'


def _is_number(value):
    return isinstance(value, numbers.Real) and not isinstance(value, bool)


def derive_properties(props):
    """Map raw admin1 feature properties to the public properties shape."""
    properties = {
        'continent_code': props.get('cont_code'),
        'country_a2': props.get('iso_a2'),
        'country_a3': props.get('adm0_a3'),
        'region_code': props.get('region_code'),
    }
    state_code = props.get('iso_3166_2') or ''
    if state_code and not state_code.endswith(STATE_CODE_NOT_APPLICABLE):
        properties['state_code'] = state_code
    return properties


def _feature_collection(*features):
    return {'type': 'FeatureCollection', 'features': list(features)}


class LookupService:
    """Scans a FeatureIndex for the boundary containing a coordinate.

    Args:
        features: FeatureIndex to scan, never mutated
        cache: optional LRUCache shared with other services
    """

    def __init__(self, features, cache=None):
        self.features = features
        self.cache = cache

    def reverse_geolocation(self, lat, lng, mode=MODE_PROPERTIES):
        """Return the result for mode, None when nothing matches, or an InputError.

        Every call returns a fresh copy; callers may mutate it freely.
        """
        if not _is_number(lat) or not _is_number(lng):
            return InputError(lat, lng)

        key = (lat, lng, mode)
        if self.cache is not None:
            cached = self.cache.get(key)
            if cached is not None:
                return copy.deepcopy(cached)

        feature = self.features.find((lng, lat))
        if feature is None:
            logger.debug(f'No boundary contains ({lat}, {lng})')
            return None

        result = self._build_result(feature, mode)
        if self.cache is not None:
            self.cache.set(key, result)
        return copy.deepcopy(result)

    def _build_result(self, feature, mode):
        if mode == MODE_RAW:
            return _feature_collection(copy.deepcopy(feature.source))

        properties = derive_properties(feature.properties)
        if mode == MODE_GEOJSON:
            return _feature_collection({
                'type': 'Feature',
                'properties': properties,
                'geometry': copy.deepcopy(feature.source['geometry']),
            })
        return properties

    def look_up(self, lat, lng):
        return self.reverse_geolocation(lat, lng)

    def look_up_raw(self, lat, lng):
        return self.reverse_geolocation(lat, lng, MODE_RAW)

    def look_up_geojson(self, lat, lng):
        return self.reverse_geolocation(lat, lng, MODE_GEOJSON)

    def get_state_geojson_by_code(self, state_code):
        """Return the state's boundary feature with trimmed properties, or None."""
        feature = self.features.find_by_state_code(state_code)
        if feature is None:
            return None

        state = copy.deepcopy(feature.source)
        state['properties'] = {
            'country_a2': feature.properties.get('iso_a2'),
            'region_code': feature.properties.get('region_code'),
            'state_code': state_code,
        }
        return state

    def get_cache_stats(self):
        if self.cache is None:
            return None
        return self.cache.stats()

    def clear_cache(self):
        if self.cache is not None:
            self.cache.clear()
