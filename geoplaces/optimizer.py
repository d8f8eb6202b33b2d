"""Builds a reduced dataset covering only a set of target countries."""

import json
import logging
import os
from datetime import datetime, timezone

from geoplaces.config import (
    OPTIMIZED_ADMIN1_FILE,
    OPTIMIZED_CONTINENTS_FILE,
    OPTIMIZED_COUNTRIES_FILE,
    OPTIMIZED_METADATA_FILE,
    OPTIMIZED_REGIONS_FILE,
)

logger = logging.getLogger(__name__)


def build_optimized_dataset(admin1, countries, continents, regions, countries_a2, countries_a3):
    """Subset the full dataset documents to the target countries.

    Args:
        admin1: GeoJSON FeatureCollection of state boundaries
        countries, continents, regions: full companion tables
        countries_a2: alpha-2 codes to keep
        countries_a3: alpha-3 codes to keep (matched against adm0_a3)

    Returns:
        dict of relative output path -> document, including the metadata file.
    """
    countries_a2 = set(countries_a2)
    countries_a3 = set(countries_a3)

    optimized_admin1 = {
        'type': 'FeatureCollection',
        'features': [
            f for f in admin1['features']
            if f['properties'].get('iso_a2') in countries_a2
            or f['properties'].get('adm0_a3') in countries_a3
        ],
    }
    optimized_countries = [c for c in countries if c.get('country_a2') in countries_a2]

    # Each kept country pulls in only the first continent that lists it
    needed = set()
    for country in optimized_countries:
        for continent in continents:
            if country['country_a2'] in (continent.get('countries') or []):
                needed.add(continent['continent_code'])
                break
    optimized_continents = [c for c in continents if c['continent_code'] in needed]
    optimized_regions = [r for r in regions if r.get('country_a2') in countries_a2]

    metadata = {
        'created': datetime.now(timezone.utc).isoformat(),
        'countries': sorted(countries_a2),
        'statistics': {
            'admin1': {'original': len(admin1['features']), 'optimized': len(optimized_admin1['features'])},
            'countries': {'original': len(countries), 'optimized': len(optimized_countries)},
            'continents': {'original': len(continents), 'optimized': len(optimized_continents)},
            'regions': {'original': len(regions), 'optimized': len(optimized_regions)},
        },
    }

    for name, stats in metadata['statistics'].items():
        logger.info(f"{name}: {stats['original']} -> {stats['optimized']}")

    return {
        OPTIMIZED_ADMIN1_FILE: optimized_admin1,
        OPTIMIZED_COUNTRIES_FILE: optimized_countries,
        OPTIMIZED_CONTINENTS_FILE: optimized_continents,
        OPTIMIZED_REGIONS_FILE: optimized_regions,
        OPTIMIZED_METADATA_FILE: metadata,
    }


def write_optimized_dataset(documents, data_dir):
    """Write each document under data_dir, creating the optimized/ directory."""
    for path, document in documents.items():
        full_path = os.path.join(data_dir, path)
        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, 'w', encoding='utf-8') as f:
            json.dump(document, f, indent=2)
        logger.info(f'Wrote {full_path}')


def publish_optimized_dataset(documents, s3):
    """Upload each document through an S3IO instance."""
    for path, document in documents.items():
        s3.write_json(path, document)
