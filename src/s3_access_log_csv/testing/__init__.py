from ._helpers import stub_get_object, stub_s3_access_log_bucket

__all__ = ["stub_get_object", "stub_s3_access_log_bucket"]
