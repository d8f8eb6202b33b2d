"""Configuration constants for geoplaces."""

# Result cache capacity in bytes (50 MiB)
DEFAULT_CACHE_SIZE = 50 * 1024 * 1024

# Lookup output modes; anything other than raw/geojson yields properties only
MODE_PROPERTIES = 'properties'
MODE_RAW = 'raw'
MODE_GEOJSON = 'geojson'

# iso_3166_2 codes ending with this suffix have no usable state code
STATE_CODE_NOT_APPLICABLE = '~'

# Dataset layout, relative to the data root (local directory or S3 prefix)
ADMIN1_FILE = 'states/admin1.json'
COUNTRIES_FILE = 'countries/countries.json'
CONTINENTS_FILE = 'continents/continents.json'
REGIONS_FILE = 'regions/regions.json'
COUNTRY_GROUPINGS_FILE = 'country-groupings/country-groupings.json'

OPTIMIZED_PREFIX = 'optimized/'
OPTIMIZED_ADMIN1_FILE = OPTIMIZED_PREFIX + 'admin1.json'
OPTIMIZED_COUNTRIES_FILE = OPTIMIZED_PREFIX + 'countries.json'
OPTIMIZED_CONTINENTS_FILE = OPTIMIZED_PREFIX + 'continents.json'
OPTIMIZED_REGIONS_FILE = OPTIMIZED_PREFIX + 'regions.json'
OPTIMIZED_METADATA_FILE = OPTIMIZED_PREFIX + 'metadata.json'

# Countries kept by the dataset optimizer
TARGET_COUNTRIES = ['US', 'CA', 'MX', 'IN', 'AU']
TARGET_COUNTRIES_A3 = ['USA', 'CAN', 'MEX', 'IND', 'AUS']
