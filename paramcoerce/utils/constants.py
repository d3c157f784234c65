"""
Numeric format bounds for scalar parameters.

Maps a schema ``format`` name to the inclusive range a parsed value must fall
in. Integer formats use exact Python ints so 64-bit limits compare without
precision loss.

See: OpenAPI 2.0 "Data Types" (format column)
"""

import sys

MAX_SAFE_INTEGER = 2 ** 53 - 1

NUMERIC_FORMAT_RANGES = {
    # Signed 32-bit integers
    'int32': (-2147483648, 2147483647),

    # Signed 64-bit integers
    'int64': (-9223372036854775808, 9223372036854775807),

    # Single-precision floats (largest finite float32, rounded)
    'float': (-3.402823e38, 3.402823e38),

    # Double-precision floats
    'double': (-sys.float_info.max, sys.float_info.max),
}
