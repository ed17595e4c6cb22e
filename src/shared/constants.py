# Ellipsoid and datum for every CRS descriptor
ELLIPSOID = 'WGS84'
DATUM = 'WGS84'

# Geographic bounds (degrees, inclusive)
LON_MIN = -180.0
LON_MAX = 180.0
LAT_MIN = -90.0
LAT_MAX = 90.0

# UTM zones
UTM_ZONE_WIDTH_DEG = 6.0
UTM_ZONE_LON_OFFSET_DEG = 180.0
MIN_UTM_ZONE = 1
MAX_UTM_ZONE = 60
# Zone numbers are carried as unsigned 8-bit values
ZONE_SATURATION_MAX = 255

# UTM false offsets (meters)
UTM_FALSE_EASTING = 500_000.0
UTM_FALSE_NORTHING_SOUTH = 10_000_000.0

# MGS quadtree: 12 levels, 4096x4096 cells of 5 km per zone
MGS_LEVEL = 12
MGS_GRID_SIZE = 1 << MGS_LEVEL
MGS_GRID_HALF = MGS_GRID_SIZE // 2
MGS_CELL_SIZE_M = 5_000.0
MGS_DIGITS = '0123'

# Output precision
GEOGRAPHIC_DECIMALS = 5

# Projection transformer cache
TRANSFORMER_CACHE_SIZE_DEFAULT = 16

# Configuration
CONFIG_ENV_VAR = 'MGSCONV_CONFIG'
CONFIG_DEFAULT_PATH = '~/.config/mgsconv/config.toml'
LOG_LEVEL_DEFAULT = 'WARNING'
LOG_FORMAT = '%(asctime)s - %(name)s - %(levelname)s - %(message)s'

# Process exit codes
EXIT_OK = 0
EXIT_INVALID_INPUT = 1
EXIT_INTERNAL_ERROR = 2
