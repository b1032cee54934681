from botocore.client import BaseClient


def fetch_s3_object_content(
    *, s3_client: BaseClient, bucket: str, key: str, encoding: str = "utf-8", errors: str = "replace"
) -> str | None:
    """
    Retrieve the full text of a single S3 object.

    Bytes that cannot be decoded are handled according to `errors`; by default they become U+FFFD.

    Returns None if the response carries no body; any error raised by the client is left to propagate.
    """
    response = s3_client.get_object(Bucket=bucket, Key=key)

    body = response.get("Body", None)
    if body is None:
        return None

    content = body.read().decode(encoding=encoding, errors=errors)

    return content
