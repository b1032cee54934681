import collections

from botocore.client import BaseClient


class S3ObjectKeyCursor:
    def __init__(self, *, s3_client: BaseClient, bucket: str, prefix: str):
        """
        Lazily list the keys of all non-empty objects under a prefix, one page of the listing at a time.

        Parameters
        ----------
        s3_client : botocore.client.BaseClient
            A boto3 S3 client.
        bucket : string
            The name of the bucket to list.
        prefix : string
            Only keys starting with this prefix are listed.
        """
        self.s3_client = s3_client
        self.bucket = bucket
        self.prefix = prefix

        self.page_buffer: collections.deque[str] = collections.deque()
        self.continuation_token: str | None = None
        self.has_more_pages = True

    def __iter__(self):
        return self

    def __next__(self) -> str:
        """Retrieve the next object key, requesting another page only once the current one is exhausted."""
        while len(self.page_buffer) == 0:
            if not self.has_more_pages:
                raise StopIteration

            self.page_buffer.extend(self._request_next_page())

        return self.page_buffer.popleft()

    def _request_next_page(self) -> list[str]:
        request_kwargs = dict(Bucket=self.bucket, Prefix=self.prefix)
        if self.continuation_token is not None:
            request_kwargs["ContinuationToken"] = self.continuation_token

        response = self.s3_client.list_objects_v2(**request_kwargs)

        contents = response.get("Contents", None)
        if contents is None:
            self.has_more_pages = False
            return []

        if response.get("IsTruncated", False) is True:
            self.continuation_token = response["NextContinuationToken"]
        else:
            self.has_more_pages = False

        # Zero-byte objects are folder markers and never hold log lines
        keys = [
            content["Key"]
            for content in contents
            if content.get("Key", None) is not None and content.get("Size", 0) > 0
        ]

        return keys


def iterate_s3_object_keys(*, s3_client: BaseClient, bucket: str, prefix: str) -> S3ObjectKeyCursor:
    """Start a fresh listing of the non-empty objects under a prefix."""
    return S3ObjectKeyCursor(s3_client=s3_client, bucket=bucket, prefix=prefix)
