'''
All settings, configurations, and constants for Gridiron Scout.
'''

import os

from dotenv import load_dotenv

load_dotenv()

# Data paths
DATA_DIR = os.getenv("GRIDIRON_DATA_DIR", "data")

# Load order is merge precedence: a later file overwrites an earlier one on shared fields.
SOURCE_FILES = [
    "Power 5 Offense Grades.csv",
    "Power 5 Defense Grades.csv",
    "Power 5 ST Grades.csv",
    "pff-data.csv",
    "Group 5 Offense Grades.csv",
    "Group 5 Defense Grades.csv",
    "Group 5 ST Grades.csv",
]

# Name matching
MATCH_STRATEGY = os.getenv("GRIDIRON_MATCH_STRATEGY", "fuzzy")  # fuzzy | substring
FUZZY_THRESHOLD = int(os.getenv("GRIDIRON_FUZZY_THRESHOLD", "85"))
FUZZY_MIN_TERM_LENGTH = int(os.getenv("GRIDIRON_FUZZY_MIN_TERM_LENGTH", "4"))

# Logging
LOG_LEVEL = os.getenv("GRIDIRON_LOG_LEVEL", "INFO")
LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"

# HTTP adapter
API_HOST = os.getenv("GRIDIRON_API_HOST", "127.0.0.1")
API_PORT = int(os.getenv("GRIDIRON_API_PORT", "3000"))
CORS_ORIGINS = [
    o.strip()
    for o in os.getenv("GRIDIRON_CORS_ORIGINS", "http://localhost:3000,http://127.0.0.1:3000").split(",")
    if o.strip()
]
STATIC_DIR = os.getenv("GRIDIRON_STATIC_DIR", "public")
