"""Primary function for harvesting every S3 access log under a prefix into a single CSV document."""

import io
import sys
from typing import Literal

import boto3
from botocore.client import BaseClient
from pydantic import ConfigDict, Field, validate_call

from ._csv_emitter import write_log_records_to_csv
from ._globals import _MALFORMED_LINE_HANDLING_OPTIONS
from ._s3_access_log_aggregator import aggregate_s3_access_log_records
from ._s3_object_fetcher import fetch_s3_object_content
from ._s3_object_key_cursor import iterate_s3_object_keys


@validate_call(config=ConfigDict(arbitrary_types_allowed=True))
def harvest_s3_access_logs_to_csv(
    *,
    bucket: str,
    prefix: str,
    s3_client: BaseClient | None = None,
    access_key_id: str | None = None,
    secret_access_key: str | None = None,
    region: str | None = None,
    output: io.TextIOBase | None = None,
    maximum_number_of_workers: int = Field(ge=1, default=1),
    malformed_line_handling: Literal[_MALFORMED_LINE_HANDLING_OPTIONS] = "raise",
) -> None:
    """
    List, fetch, and parse every non-empty S3 access log object under a prefix, then write all records as CSV.

    Nothing is written to the output until every object has been fetched and parsed, so a run that fails or is
    interrupted part way through never leaves a partial CSV document behind.

    Parameters
    ----------
    bucket : string
        The name of the bucket holding the access log objects.
    prefix : string
        Only objects whose keys start with this prefix are harvested.
    s3_client : botocore.client.BaseClient, optional
        A boto3 S3 client. If not specified, one is created from `access_key_id`, `secret_access_key`, and `region`.
    access_key_id : string, optional
        The AWS access key ID used to create the S3 client.
    secret_access_key : string, optional
        The AWS secret access key used to create the S3 client.
    region : string, optional
        The AWS region used to create the S3 client.
    output : text stream, optional
        Where to write the CSV document. Defaults to standard output.
    maximum_number_of_workers : int, default: 1
        The maximum number of threads used to fetch and parse objects.
        The order of the CSV rows is the same for any number of workers.
    malformed_line_handling : "raise" or "collect", default: "raise"
        What to do when a line has too few tokens to fill every field.
        See `aggregate_s3_access_log_records` for details.
    """
    if s3_client is None:
        s3_client = boto3.client(
            "s3",
            aws_access_key_id=access_key_id,
            aws_secret_access_key=secret_access_key,
            region_name=region,
        )
    if output is None:
        output = sys.stdout

    object_keys = iterate_s3_object_keys(s3_client=s3_client, bucket=bucket, prefix=prefix)
    log_records = aggregate_s3_access_log_records(
        object_keys=object_keys,
        fetch_content=lambda key: fetch_s3_object_content(s3_client=s3_client, bucket=bucket, key=key),
        maximum_number_of_workers=maximum_number_of_workers,
        malformed_line_handling=malformed_line_handling,
    )

    write_log_records_to_csv(log_records=log_records, output=output)

    return None
