import os

DEFAULT_LABEL_COLUMN: str = os.getenv("TABLEBLOCKS_LABEL_COLUMN", "A").strip().upper()

CSV_DELIMITER: str = os.getenv("TABLEBLOCKS_CSV_DELIMITER", ",")

LOG_LEVEL: str = os.getenv("TABLEBLOCKS_LOG_LEVEL", "INFO").upper()
