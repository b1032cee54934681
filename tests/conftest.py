import pathlib

import boto3
import pytest
from botocore.stub import Stubber

EXAMPLE_BUCKET_OWNER = "79a59df900b949e55d96a1e698fbacedfd6e09d98eacf8f8d5218e7cd47ef2be"


@pytest.fixture
def s3_client():
    """A real S3 client that never leaves the process once wrapped in a Stubber."""
    return boto3.client(
        "s3",
        aws_access_key_id="testing",
        aws_secret_access_key="testing",
        region_name="us-east-1",
    )


@pytest.fixture
def stubber(s3_client):
    with Stubber(s3_client) as active_stubber:
        yield active_stubber


@pytest.fixture(scope="session")
def examples_folder_path() -> pathlib.Path:
    return pathlib.Path(__file__).parent / "examples"
