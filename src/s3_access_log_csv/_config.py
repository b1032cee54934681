import pathlib

S3_ACCESS_LOG_CSV_BASE_FOLDER_PATH = pathlib.Path.home() / ".s3_access_log_csv"
S3_ACCESS_LOG_CSV_BASE_FOLDER_PATH.mkdir(exist_ok=True)

_ERRORS_FOLDER_PATH = S3_ACCESS_LOG_CSV_BASE_FOLDER_PATH / "errors"

_CSV_USAGE_MESSAGE = 'Please supply the arguments: "accessKey" "secret" "region" "bucket" "prefix"'
