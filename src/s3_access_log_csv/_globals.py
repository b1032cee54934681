import collections

# https://docs.aws.amazon.com/AmazonS3/latest/userguide/LogFormat.html
# Order of the space-separated tokens that precede the user agent
_S3_ACCESS_LOG_POSITIONAL_FIELDS = (
    "bucket_owner",
    "bucket",
    "time",
    "timezone",
    "remote_ip",
    "requester",
    "request_id",
    "operation",
    "key",
    "request_uri_method",
    "request_uri_path",
    "request_uri_protocol",
    "status_code",
    "error_code",
    "bytes_sent",
    "object_size",
    "turn_around_time",
    "referrer",
)
_NUMBER_OF_POSITIONAL_TOKENS = len(_S3_ACCESS_LOG_POSITIONAL_FIELDS)

# At least one token must remain after the positional ones for the version ID
_MINIMUM_NUMBER_OF_TOKENS = _NUMBER_OF_POSITIONAL_TOKENS + 1

_LOG_RECORD_FIELDS = (
    "source_key",
    "bucket_owner",
    "bucket",
    "time",
    "remote_ip",
    "requester",
    "request_id",
    "operation",
    "key",
    "request_uri",
    "status_code",
    "error_code",
    "bytes_sent",
    "object_size",
    "turn_around_time",
    "referrer",
    "user_agent",
    "version_id",
)
LogRecord = collections.namedtuple("LogRecord", _LOG_RECORD_FIELDS)

# Column names of the emitted CSV; kept compatible with previously harvested files
_CSV_HEADER = (
    "sourceKey",
    "bucketOwner",
    "bucket",
    "time",
    "remoteIP",
    "requester",
    "requestId",
    "operation",
    "key",
    "requestURI",
    "statusCode",
    "errorCode",
    "bytesSent",
    "objectSize",
    "turnAroundTime",
    "referrer",
    "userAgent",
    "versionId",
)

_MALFORMED_LINE_HANDLING_OPTIONS = ("raise", "collect")
