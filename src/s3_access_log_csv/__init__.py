"""
S3 access log CSV
=================

Harvest the server access log objects that S3 writes under a bucket prefix and flatten them into a single CSV document.

Each line of an access log is a space-separated record of one request made to the logged bucket:

- The bracketed timestamp is split over two tokens (`[06/Feb/2019:00:00:38` and `+0000]`).
- The request URI is split over three quoted tokens (`"GET`, `/key`, and `HTTP/1.1"`).
- The user agent may contain any number of spaces and is only delimited by the version ID that always ends the line.

Every field is kept as text; sentinels such as `-` are passed through unchanged.
"""

from ._config import S3_ACCESS_LOG_CSV_BASE_FOLDER_PATH
from ._globals import LogRecord
from ._s3_access_log_line_parser import (
    MalformedS3AccessLogLineError,
    parse_s3_access_log_line,
    parse_s3_access_log_content,
)
from ._s3_object_key_cursor import S3ObjectKeyCursor, iterate_s3_object_keys
from ._s3_object_fetcher import fetch_s3_object_content
from ._s3_access_log_aggregator import aggregate_s3_access_log_records
from ._csv_emitter import write_log_records_to_csv
from ._s3_access_log_harvester import harvest_s3_access_logs_to_csv

__all__ = [
    "S3_ACCESS_LOG_CSV_BASE_FOLDER_PATH",
    "LogRecord",
    "MalformedS3AccessLogLineError",
    "parse_s3_access_log_line",
    "parse_s3_access_log_content",
    "S3ObjectKeyCursor",
    "iterate_s3_object_keys",
    "fetch_s3_object_content",
    "aggregate_s3_access_log_records",
    "write_log_records_to_csv",
    "harvest_s3_access_logs_to_csv",
]
