"""Log Analyzer - Constants and patterns"""

import re

VERSION = "1.0.0"

# Input layout: <address>,<timestamp>,<path>,<status>,<agent>
FIELD_DELIMITER = ','
FIELD_COUNT = 5
FIELD_NAMES = ('address', 'timestamp', 'path', 'status', 'agent')

TIMESTAMP_FORMAT = '%Y-%m-%d %H:%M'
TIMESTAMP_PATTERN = re.compile(r'^\d{4}-\d{2}-\d{2} \d{2}:\d{2}$', re.ASCII)
STATUS_PATTERN = re.compile(r'^\d+$', re.ASCII)

# Analysis defaults
DEFAULT_TOP_K = 3
DEFAULT_TOP_ADDRESSES = 10
DEFAULT_FAILURE_STATUSES = frozenset({404, 500})
DEFAULT_THRESHOLD = 3
