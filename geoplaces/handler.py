"""Lambda handler for reverse geolocation lookups.

Loads the boundary dataset once per container, then answers requests of the
form {"lat": ..., "lng": ..., "mode": ...} (directly or as API Gateway query
string parameters) with the matching continent, country, region and state.
"""

import json
import os
import logging

from geoplaces.cache import LRUCache
from geoplaces.config import DEFAULT_CACHE_SIZE, MODE_PROPERTIES
from geoplaces.data_loader import DatasetLoader
from geoplaces.lookup import InputError, LookupService
from geoplaces.s3_io import S3IO

logger = logging.getLogger()
logger.setLevel(logging.INFO)

_service = None


def _as_bool(value):
    return value.strip().lower() in ('1', 'true', 'yes', 'on')


def build_service():
    """Build a LookupService from GEOPLACES_* environment variables."""
    cache_size = int(os.environ.get('GEOPLACES_CACHE_SIZE', DEFAULT_CACHE_SIZE))
    use_optimized = _as_bool(os.environ.get('GEOPLACES_USE_OPTIMIZED', 'true'))
    bucket = os.environ.get('GEOPLACES_BUCKET')

    cache = LRUCache(cache_size) if cache_size > 0 else None
    s3 = S3IO(bucket=bucket, prefix=os.environ.get('GEOPLACES_PREFIX', '')) if bucket else None
    loader = DatasetLoader(data_dir=os.environ.get('GEOPLACES_DATA_DIR'), s3=s3, cache=cache)

    dataset = loader.load(use_optimized=use_optimized)
    logger.info(f'Lookup service ready (cache: {cache_size} bytes, optimized: {dataset.is_optimized})')
    return LookupService(dataset.admin1, cache=cache)


def get_service():
    global _service
    if _service is None:
        _service = build_service()
    return _service


def _coordinates(lat, lng):
    # Query string parameters arrive as text; on a bad value keep both as sent
    try:
        return tuple(float(v) if isinstance(v, str) else v for v in (lat, lng))
    except ValueError:
        return lat, lng


def _response(status_code, body):
    return {
        'statusCode': status_code,
        'headers': {'Content-Type': 'application/json'},
        'body': json.dumps(body, separators=(',', ':')),
    }


def handler(event, context):
    params = event.get('queryStringParameters') or event
    lat, lng = _coordinates(params.get('lat'), params.get('lng'))
    mode = params.get('mode') or MODE_PROPERTIES

    result = get_service().reverse_geolocation(lat, lng, mode)

    if isinstance(result, InputError):
        logger.warning(result.message)
        return _response(400, {'error': result.message})
    if result is None:
        logger.info(f'No boundary found for ({lat}, {lng})')
        return _response(404, {'error': 'No boundary found'})
    return _response(200, result)
