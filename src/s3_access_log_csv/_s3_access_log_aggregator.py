"""Primary functions for gathering the parsed lines of many S3 access log objects into one ordered sequence."""

import uuid
from collections.abc import Callable, Iterable
from concurrent.futures import ThreadPoolExecutor
from typing import Literal

import tqdm
from pydantic import Field, validate_call

from ._error_collection import _collect_malformed_line_error
from ._globals import _MALFORMED_LINE_HANDLING_OPTIONS, LogRecord
from ._s3_access_log_line_parser import (
    MalformedS3AccessLogLineError,
    _iterate_trimmed_lines,
    parse_s3_access_log_content,
    parse_s3_access_log_line,
)


@validate_call
def aggregate_s3_access_log_records(
    *,
    object_keys: Iterable[str],
    fetch_content: Callable[[str], str | None],
    maximum_number_of_workers: int = Field(ge=1, default=1),
    malformed_line_handling: Literal[_MALFORMED_LINE_HANDLING_OPTIONS] = "raise",
    progress_bar_kwargs: dict | None = None,
) -> list[LogRecord]:
    """
    Fetch and parse the content of each object key, concatenating all records in listing order.

    Records keep the order of the object keys, and within each key the order of its lines.
    Keys whose content is absent contribute no records.

    Parameters
    ----------
    object_keys : iterable of strings
        The keys of the S3 access log objects, in listing order.
    fetch_content : callable
        A function taking an object key and returning its text content, or None if the object has no body.
    maximum_number_of_workers : int, default: 1
        The maximum number of threads to fetch and parse objects with.
        The order of the returned records does not depend on this value.
    malformed_line_handling : "raise" or "collect", default: "raise"
        What to do when a line has too few tokens.
        "raise" aborts the whole aggregation with a MalformedS3AccessLogLineError.
        "collect" writes the line to the error collection folder and skips it.
    progress_bar_kwargs : dict, optional
        Keyword arguments to pass to the tqdm progress bar over object keys.
    """
    progress_bar_kwargs = progress_bar_kwargs or dict()

    task_id = str(uuid.uuid4())[:5]

    def fetch_and_parse(object_key: str) -> list[LogRecord]:
        content = fetch_content(object_key)
        if content is None:
            return []

        if malformed_line_handling == "raise":
            return parse_s3_access_log_content(source_key=object_key, content=content)

        return _parse_s3_access_log_content_collecting_errors(
            source_key=object_key, content=content, task_id=task_id
        )

    log_records = []
    if maximum_number_of_workers == 1:
        default_tqdm_kwargs = {"desc": "Parsing S3 access log objects...", "unit": "objects", "leave": False}
        resolved_tqdm_kwargs = {**default_tqdm_kwargs}
        resolved_tqdm_kwargs.update(progress_bar_kwargs)

        for object_key in tqdm.tqdm(iterable=object_keys, **resolved_tqdm_kwargs):
            log_records.extend(fetch_and_parse(object_key))
    else:
        default_tqdm_kwargs = {
            "desc": f"Parsing S3 access log objects using {maximum_number_of_workers} workers...",
            "unit": "objects",
            "leave": False,
        }
        resolved_tqdm_kwargs = {**default_tqdm_kwargs}
        resolved_tqdm_kwargs.update(progress_bar_kwargs)

        # `.map` yields results in submission order regardless of which worker finishes first
        with ThreadPoolExecutor(max_workers=maximum_number_of_workers) as executor:
            for log_records_per_object in tqdm.tqdm(
                iterable=executor.map(fetch_and_parse, object_keys), **resolved_tqdm_kwargs
            ):
                log_records.extend(log_records_per_object)

    return log_records


def _parse_s3_access_log_content_collecting_errors(*, source_key: str, content: str, task_id: str) -> list[LogRecord]:
    log_records = []
    for trimmed_line in _iterate_trimmed_lines(content=content):
        try:
            log_record = parse_s3_access_log_line(source_key=source_key, raw_s3_access_log_line=trimmed_line)
        except MalformedS3AccessLogLineError as exception:
            _collect_malformed_line_error(exception=exception, task_id=task_id)
            continue

        log_records.append(log_record)

    return log_records
