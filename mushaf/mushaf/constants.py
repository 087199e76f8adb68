"""
Constants shared across the Mushaf library.
"""

TOTAL_CHAPTERS = 114
TOTAL_VERSES = 6236
TOTAL_JUZ = 30
TOTAL_HIZB = 60
HIZB_PER_JUZ = 2
TOTAL_PROSTRATION_VERSES = 15

DEFAULT_SOURCE = "Tanzil Project - https://tanzil.net"
DEFAULT_VERSION = "1.1"

MECCAN = "Meccan"
MEDINAN = "Medinan"

# Reading speed used for time estimates (ayat per minute)
VERSES_PER_MINUTE = 2.0

# Days in a standard full reading plan
READING_PLAN_DAYS = 30
