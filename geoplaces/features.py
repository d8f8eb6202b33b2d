"""Ordered, read-only collection of boundary features."""

import logging
from dataclasses import dataclass

from geoplaces.geo_utils import bbox_contains, contains_point, geometry_bbox, geometry_from_geojson

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Feature:
    geometry: object
    properties: dict
    source: dict
    bbox: tuple

    @classmethod
    def from_geojson(cls, feature):
        """Build a Feature from a GeoJSON feature dict, or None if it has no polygon geometry."""
        geometry = geometry_from_geojson(feature.get('geometry'))
        if geometry is None:
            return None
        return cls(
            geometry=geometry,
            properties=feature.get('properties') or {},
            source=feature,
            bbox=geometry_bbox(geometry),
        )

    def contains(self, point):
        return bbox_contains(self.bbox, point) and contains_point(self.geometry, point)


class FeatureIndex:
    """Boundary features in scan order.

    When several geometries contain the same point, the earliest feature wins.
    """

    def __init__(self, features):
        self._features = tuple(features)

    @classmethod
    def from_geojson(cls, collection):
        features = []
        skipped = 0
        for raw in collection.get('features', []):
            feature = Feature.from_geojson(raw)
            if feature is None:
                skipped += 1
                continue
            features.append(feature)

        if skipped:
            logger.debug(f'Skipped {skipped} features without polygon geometry')
        return cls(features)

    def __len__(self):
        return len(self._features)

    def __iter__(self):
        return iter(self._features)

    def find(self, point):
        """Return the first feature containing point (lon, lat), or None."""
        for feature in self._features:
            if feature.contains(point):
                return feature
        return None

    def find_by_state_code(self, state_code):
        for feature in self._features:
            if feature.properties.get('iso_3166_2') == state_code:
                return feature
        return None
