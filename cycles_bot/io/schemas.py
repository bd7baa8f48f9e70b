"""Arrow schema for the per-tick decision log.

Every module that writes or reads the tick log works against this column
contract.
"""

from __future__ import annotations

import pyarrow as pa

TICK_LOG_SCHEMA_VERSION = 1

TICK_LOG_SCHEMA = pa.schema(
    [
        ("schema_version", pa.int64()),
        ("bot_name", pa.string()),
        ("tick", pa.int64()),
        ("frame", pa.int64()),
        ("x", pa.int64()),
        ("y", pa.int64()),
        ("direction", pa.string()),
        ("mode", pa.string()),
        ("target_x", pa.int64()),
        ("target_y", pa.int64()),
        ("predicted_x", pa.int64()),
        ("predicted_y", pa.int64()),
        ("score", pa.int64()),
    ]
)
