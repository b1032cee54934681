import pytest

import s3_access_log_csv


def test_s3_object_key_cursor_pages(s3_client, stubber):
    stubber.add_response(
        method="list_objects_v2",
        service_response={
            "Contents": [{"Key": "logs/", "Size": 0}, {"Key": "logs/a", "Size": 10}, {"Key": "logs/b", "Size": 20}],
            "IsTruncated": True,
            "NextContinuationToken": "token-1",
        },
        expected_params={"Bucket": "awsexamplebucket1", "Prefix": "logs/"},
    )
    stubber.add_response(
        method="list_objects_v2",
        service_response={
            "Contents": [{"Key": "logs/c", "Size": 30}, {"Key": "logs/d", "Size": 0}],
            "IsTruncated": False,
        },
        expected_params={"Bucket": "awsexamplebucket1", "Prefix": "logs/", "ContinuationToken": "token-1"},
    )

    s3_object_key_cursor = s3_access_log_csv.iterate_s3_object_keys(
        s3_client=s3_client, bucket="awsexamplebucket1", prefix="logs/"
    )

    assert iter(s3_object_key_cursor) is s3_object_key_cursor, "S3ObjectKeyCursor object is not iterable!"
    assert list(s3_object_key_cursor) == ["logs/a", "logs/b", "logs/c"]
    stubber.assert_no_pending_responses()

    with pytest.raises(StopIteration):
        next(s3_object_key_cursor)


def test_s3_object_key_cursor_is_lazy(s3_client, stubber):
    stubber.add_response(
        method="list_objects_v2",
        service_response={
            "Contents": [{"Key": "logs/a", "Size": 10}],
            "IsTruncated": True,
            "NextContinuationToken": "token-1",
        },
        expected_params={"Bucket": "awsexamplebucket1", "Prefix": "logs/"},
    )

    s3_object_key_cursor = s3_access_log_csv.S3ObjectKeyCursor(
        s3_client=s3_client, bucket="awsexamplebucket1", prefix="logs/"
    )
    assert next(s3_object_key_cursor) == "logs/a"

    # The second page is only requested once the first has been consumed
    assert s3_object_key_cursor.has_more_pages is True
    assert s3_object_key_cursor.continuation_token == "token-1"
    stubber.assert_no_pending_responses()


def test_s3_object_key_cursor_skips_pages_without_keys_to_yield(s3_client, stubber):
    stubber.add_response(
        method="list_objects_v2",
        service_response={
            "Contents": [{"Key": "logs/", "Size": 0}],
            "IsTruncated": True,
            "NextContinuationToken": "token-1",
        },
        expected_params={"Bucket": "awsexamplebucket1", "Prefix": "logs/"},
    )
    stubber.add_response(
        method="list_objects_v2",
        service_response={"Contents": [{"Key": "logs/a", "Size": 5}], "IsTruncated": False},
        expected_params={"Bucket": "awsexamplebucket1", "Prefix": "logs/", "ContinuationToken": "token-1"},
    )

    s3_object_key_cursor = s3_access_log_csv.iterate_s3_object_keys(
        s3_client=s3_client, bucket="awsexamplebucket1", prefix="logs/"
    )

    assert list(s3_object_key_cursor) == ["logs/a"]


def test_s3_object_key_cursor_empty_prefix(s3_client, stubber):
    stubber.add_response(
        method="list_objects_v2",
        service_response={"IsTruncated": False, "KeyCount": 0},
        expected_params={"Bucket": "awsexamplebucket1", "Prefix": "missing/"},
    )

    s3_object_key_cursor = s3_access_log_csv.iterate_s3_object_keys(
        s3_client=s3_client, bucket="awsexamplebucket1", prefix="missing/"
    )

    assert list(s3_object_key_cursor) == []


def test_s3_object_key_cursor_propagates_listing_errors(s3_client, stubber):
    stubber.add_client_error(
        method="list_objects_v2",
        service_error_code="NoSuchBucket",
        service_message="The specified bucket does not exist",
        http_status_code=404,
    )

    s3_object_key_cursor = s3_access_log_csv.iterate_s3_object_keys(
        s3_client=s3_client, bucket="awsexamplebucket1", prefix="logs/"
    )

    with pytest.raises(s3_client.exceptions.NoSuchBucket):
        list(s3_object_key_cursor)
