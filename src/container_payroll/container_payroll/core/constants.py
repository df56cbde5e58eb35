"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

from decimal import Decimal

# Teams are always two workers; payments are split evenly between them.
TEAM_SIZE = 2

# (lower bound of package count, payment) for the flat tiers, ascending.
DEFAULT_PAYMENT_TIERS = (
    (0, Decimal("60")),
    (1000, Decimal("85")),
    (2000, Decimal("100")),
)
# From this count on every further full thousand adds a step.
DEFAULT_STEP_THRESHOLD = 3000
DEFAULT_STEP_SIZE = 1000
DEFAULT_STEP_AMOUNT = Decimal("25")

UNKNOWN_WORKER_LABEL = "Unknown worker"
UNKNOWN_TEAM_LABEL = "Unknown team"

DEFAULT_DATA_DIR = "data"
MYSQL_COLLECTIONS_TABLE = "collections"
