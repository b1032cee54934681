"""
Primary functions for parsing lines of a raw S3 access log.

The strategy is to...

1) Split the raw line on single spaces. Consecutive spaces are not merged, so an empty field shifts every field after
   it; this mirrors how the logs have always been read and is deliberately not corrected here.
2) Take the fixed head of positional tokens (bucket owner through referrer) by index.
3) Treat everything after the head as a residual slice whose last token is the version ID; all tokens before it,
   re-joined by single spaces, form the user agent (which may itself contain spaces).
4) Rebuild the bracketed timestamp and the quoted request URI from their split tokens.
"""

import re
from collections.abc import Iterator

from ._globals import (
    _MINIMUM_NUMBER_OF_TOKENS,
    _NUMBER_OF_POSITIONAL_TOKENS,
    _S3_ACCESS_LOG_POSITIONAL_FIELDS,
    LogRecord,
)

# Whitespace as for str.strip(), plus byte order marks (which str.strip() keeps)
_LINE_EDGES_REGEX = re.compile(pattern=r"^[\s\ufeff]+|[\s\ufeff]+$")


class MalformedS3AccessLogLineError(ValueError):
    """Raised when a line of an S3 access log has too few tokens to fill every field."""

    def __init__(self, *, source_key: str, raw_s3_access_log_line: str, number_of_tokens: int):
        self.source_key = source_key
        self.raw_s3_access_log_line = raw_s3_access_log_line
        self.number_of_tokens = number_of_tokens

        message = (
            f"Line from '{source_key}' has {number_of_tokens} space-separated tokens but at least "
            f"{_MINIMUM_NUMBER_OF_TOKENS} are required: '{raw_s3_access_log_line}'"
        )
        super().__init__(message)


def parse_s3_access_log_line(*, source_key: str, raw_s3_access_log_line: str) -> LogRecord:
    """
    Parse a single line of a raw S3 access log into a LogRecord.

    Parameters
    ----------
    source_key : str
        The key of the S3 object the line was read from.
    raw_s3_access_log_line : str
        A single, already trimmed, line of the access log.

    Raises
    ------
    MalformedS3AccessLogLineError
        If the line does not have enough tokens to fill every field through the version ID.
    """
    tokens = raw_s3_access_log_line.split(" ")

    number_of_tokens = len(tokens)
    if number_of_tokens < _MINIMUM_NUMBER_OF_TOKENS:
        raise MalformedS3AccessLogLineError(
            source_key=source_key,
            raw_s3_access_log_line=raw_s3_access_log_line,
            number_of_tokens=number_of_tokens,
        )

    positional = dict(zip(_S3_ACCESS_LOG_POSITIONAL_FIELDS, tokens[:_NUMBER_OF_POSITIONAL_TOKENS]))
    user_agent_and_version_id = tokens[_NUMBER_OF_POSITIONAL_TOKENS:]

    version_id = user_agent_and_version_id[-1]
    user_agent = " ".join(user_agent_and_version_id[:-1])

    # No separator between the date and the offset; downstream consumers expect '06/Feb/2019:00:00:38+0000'
    time = positional["time"][1:] + positional["timezone"][:-1]
    request_uri = " ".join(
        (
            positional["request_uri_method"][1:],
            positional["request_uri_path"],
            positional["request_uri_protocol"][:-1],
        )
    )

    log_record = LogRecord(
        source_key=source_key,
        bucket_owner=positional["bucket_owner"],
        bucket=positional["bucket"],
        time=time,
        remote_ip=positional["remote_ip"],
        requester=positional["requester"],
        request_id=positional["request_id"],
        operation=positional["operation"],
        key=positional["key"],
        request_uri=request_uri,
        status_code=positional["status_code"],
        error_code=positional["error_code"],
        bytes_sent=positional["bytes_sent"],
        object_size=positional["object_size"],
        turn_around_time=positional["turn_around_time"],
        referrer=positional["referrer"],
        user_agent=user_agent,
        version_id=version_id,
    )

    return log_record


def _iterate_trimmed_lines(*, content: str) -> Iterator[str]:
    """Yield each non-blank line with surrounding whitespace and byte order marks removed."""
    for line in content.split("\n"):
        trimmed_line = _LINE_EDGES_REGEX.sub(repl="", string=line)
        if trimmed_line != "":
            yield trimmed_line


def parse_s3_access_log_content(*, source_key: str, content: str) -> list[LogRecord]:
    """Parse every non-blank line of the content of one S3 access log object, in order."""
    log_records = [
        parse_s3_access_log_line(source_key=source_key, raw_s3_access_log_line=trimmed_line)
        for trimmed_line in _iterate_trimmed_lines(content=content)
    ]

    return log_records
