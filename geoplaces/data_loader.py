"""Loads boundary features and companion tables from disk or S3."""

import copy
import json
import logging
import os
from dataclasses import dataclass

from geoplaces.config import (
    ADMIN1_FILE,
    CONTINENTS_FILE,
    COUNTRIES_FILE,
    COUNTRY_GROUPINGS_FILE,
    OPTIMIZED_ADMIN1_FILE,
    OPTIMIZED_CONTINENTS_FILE,
    OPTIMIZED_COUNTRIES_FILE,
    OPTIMIZED_REGIONS_FILE,
    REGIONS_FILE,
)
from geoplaces.features import FeatureIndex

logger = logging.getLogger(__name__)

DEFAULT_DATA_DIR = os.path.join(os.path.dirname(__file__), 'data')


@dataclass(frozen=True)
class Dataset:
    admin1: FeatureIndex
    countries: list
    continents: list
    country_groupings: list
    regions: list
    is_optimized: bool


class DatasetLoader:
    """Reads dataset files from a local directory, or from S3 when s3 is given.

    Args:
        data_dir: root of the dataset layout (defaults to the bundled data/)
        s3: optional S3IO instance; takes precedence over data_dir
        cache: optional LRUCache used by read_geojson
    """

    def __init__(self, data_dir=None, s3=None, cache=None):
        self.data_dir = data_dir or DEFAULT_DATA_DIR
        self.s3 = s3
        self.cache = cache
        # Countries table from the last load(), used for alpha-3 lookups
        self.countries = []

    def load_json(self, path):
        """Read a required dataset file. Errors propagate."""
        if self.s3 is not None:
            return self.s3.load_json(path)
        with open(os.path.join(self.data_dir, path), 'r', encoding='utf-8') as f:
            return json.load(f)

    def _exists(self, path):
        if self.s3 is not None:
            return self.s3.exists(path)
        return os.path.exists(os.path.join(self.data_dir, path))

    def load(self, use_optimized=True):
        """Load the optimized dataset if present and requested, else the full one."""
        if use_optimized and self._exists(OPTIMIZED_ADMIN1_FILE):
            logger.info('Using optimized dataset')
            admin1_file, countries_file = OPTIMIZED_ADMIN1_FILE, OPTIMIZED_COUNTRIES_FILE
            continents_file, regions_file = OPTIMIZED_CONTINENTS_FILE, OPTIMIZED_REGIONS_FILE
            is_optimized = True
        else:
            if use_optimized:
                logger.info('Optimized dataset not found, using full dataset')
            admin1_file, countries_file = ADMIN1_FILE, COUNTRIES_FILE
            continents_file, regions_file = CONTINENTS_FILE, REGIONS_FILE
            is_optimized = False

        admin1 = FeatureIndex.from_geojson(self.load_json(admin1_file))
        dataset = Dataset(
            admin1=admin1,
            countries=self.load_json(countries_file),
            continents=self.load_json(continents_file),
            # Groupings are never subset by the optimizer
            country_groupings=self.load_json(COUNTRY_GROUPINGS_FILE),
            regions=self.load_json(regions_file),
            is_optimized=is_optimized,
        )
        self.countries = dataset.countries
        logger.info(
            f'Loaded {len(admin1)} boundary features, {len(dataset.countries)} countries, '
            f'{len(dataset.regions)} regions'
        )
        return dataset

    def read_geojson(self, path):
        """Read an optional GeoJSON file through the cache.

        Returns a copy the caller owns, or None if the file is missing or unreadable.
        """
        if self.cache is not None:
            cached = self.cache.get(path)
            if cached is not None:
                return copy.deepcopy(cached)

        try:
            data = self.load_json(path)
        except Exception as e:
            logger.debug(f'GeoJSON unavailable: {path} ({e})')
            return None

        if self.cache is not None:
            self.cache.set(path, data)
            return copy.deepcopy(data)
        return data

    def get_continent_geojson_by_code(self, continent_code, simplified=False):
        suffix = '-simplified' if simplified else ''
        return self.read_geojson(f'continents/{continent_code}{suffix}.json')

    def get_country_geojson_by_alpha2(self, alpha2):
        return self.read_geojson(f'countries/{alpha2}.json')

    def get_country_geojson_by_alpha3(self, alpha3):
        for country in self.countries:
            if country.get('country_a3') == alpha3:
                return self.get_country_geojson_by_alpha2(country['country_a2'])
        return None

    def get_country_grouping_geojson_by_code(self, grouping_code, simplified=False):
        suffix = '-simplified' if simplified else ''
        return self.read_geojson(f'country-groupings/{grouping_code}{suffix}.json')

    def get_region_geojson_by_code(self, region_code):
        return self.read_geojson(f'regions/{region_code}.json')
