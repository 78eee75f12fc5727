"""
Centralized Constants - SINGLE SOURCE OF TRUTH

Column allow-lists, the currency rate, month labels and the chart palette
are defined here and imported elsewhere.

DO NOT duplicate these definitions in other files.
"""

# =============================================================================
# SCHEMA
# =============================================================================

TRANSACTIONS_TABLE = 'real_estate'

# Categorical columns that may appear in GROUP BY or an equality filter.
# Anything outside this list is rejected before SQL is built.
CATEGORY_COLUMNS = (
    'area_name_en',
    'property_type_en',
    'property_usage_en',
    'rooms_en',
)

# Keys derived from instance_date
DATE_PART_COLUMNS = ('year', 'month')

GROUPABLE_COLUMNS = CATEGORY_COLUMNS + DATE_PART_COLUMNS

# Numeric columns that may be averaged
VALUE_COLUMNS = ('actual_worth',)

UNKNOWN_LABEL = 'Unknown'


# =============================================================================
# CURRENCY
# =============================================================================

# Stored worth is in AED; the dashboard displays USD.
AED_TO_USD_RATE = 3.67


# =============================================================================
# LIMITS / THRESHOLDS (defaults, overridable via Config)
# =============================================================================

PRICE_BY_AREA_LIMIT = 20
TOP_AREAS_LIMIT = 10
HEAT_RANKING_MIN_LISTINGS = 3
HEAT_RANKING_TOP_K = 20
MIN_VOLUME_YEAR = 1990

# market-volume ?range= presets -> number of complete years kept
YEAR_RANGE_PRESETS = {
    'all': None,
    '10': 10,
    '20': 20,
    '30': 30,
}


# =============================================================================
# LABELS
# =============================================================================

MONTH_ABBREVIATIONS = [
    'Jan', 'Feb', 'Mar', 'Apr', 'May', 'Jun',
    'Jul', 'Aug', 'Sep', 'Oct', 'Nov', 'Dec',
]

TREND_PERIODS = ('yearly', 'monthly')


# =============================================================================
# CHART PALETTE
# =============================================================================

PALETTE = [
    'rgba(54, 162, 235, 0.8)',   # Blue
    'rgba(255, 99, 132, 0.8)',   # Red
    'rgba(75, 192, 192, 0.8)',   # Teal
    'rgba(255, 206, 86, 0.8)',   # Yellow
    'rgba(153, 102, 255, 0.8)',  # Purple
    'rgba(255, 159, 64, 0.8)',   # Orange
    'rgba(199, 199, 199, 0.8)',  # Grey
    'rgba(83, 102, 255, 0.8)',   # Indigo
    'rgba(255, 99, 255, 0.8)',   # Pink
    'rgba(99, 255, 132, 0.8)',   # Green
]
