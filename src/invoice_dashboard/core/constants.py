"""Constants and defaults.

Note: Keep constants here to avoid magic numbers spread across code.
"""

ITEMS_PER_PAGE = 6
LATEST_INVOICES_LIMIT = 5
MIN_PASSWORD_LENGTH = 6
