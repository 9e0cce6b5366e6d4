"""
Application-wide constants for the nonprofit directory.

This module defines the fixed vocabularies and default values shared by the
filter controls, the processing pipeline and the command line front end.
"""

# Pagination
PAGE_SIZE_OPTIONS = (6, 9, 12, 15, 21, 24)
DEFAULT_PAGE_SIZE = 12

# Datastore
DEFAULT_TABLE = "nonprofits"
DEFAULT_TIMEOUT = 30  # seconds
DEFAULT_MAX_RETRIES = 3
REST_PATH = "/rest/v1"

# Focus-area tags offered by the focus-area filter
CATEGORIES = (
    "Arts & Culture",
    "Community Development",
    "Education",
    "Environment",
    "Food Security",
    "Health",
    "Housing & Homelessness",
    "Immigrant Services",
    "Workforce Development",
    "Youth Development",
)

# Locations offered by the location filter
COMMON_LOCATIONS = (
    "Alameda County",
    "Berkeley",
    "Contra Costa County",
    "East Bay",
    "Marin County",
    "Napa County",
    "Oakland",
    "Peninsula",
    "San Francisco",
    "San Jose",
    "San Mateo County",
    "Santa Clara County",
    "Solano County",
    "Sonoma County",
)

# Display
DEFAULT_TIMEZONE = "America/Los_Angeles"
