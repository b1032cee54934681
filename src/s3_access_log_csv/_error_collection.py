import datetime
import importlib.metadata
import traceback

from ._config import _ERRORS_FOLDER_PATH
from ._s3_access_log_line_parser import MalformedS3AccessLogLineError


def _collect_error(message: str, error_type: str, task_id: str | None = None) -> None:
    """
    Append an error message to a text file in the errors folder for later review.

    Parameters
    ----------
    message : str
        The error message to be collected.
        Messages are separated in the file by a blank line.
    error_type : str
        The kind of error, used to tag the file name, such as "line".
    task_id : str or None, optional
        An identifier of the run that produced the error, so each run writes to its own file.
    """
    _ERRORS_FOLDER_PATH.mkdir(exist_ok=True)

    version = importlib.metadata.version(distribution_name="s3_access_log_csv")
    date = datetime.datetime.now().strftime("%y%m%d")
    task_suffix = f"_{task_id}" if task_id is not None else ""
    error_collection_file_path = _ERRORS_FOLDER_PATH / f"v{version}_{date}_{error_type}_errors{task_suffix}.txt"

    with open(file=error_collection_file_path, mode="a") as io:
        io.write(f"{message}\n\n")

    return None


def _collect_malformed_line_error(exception: MalformedS3AccessLogLineError, task_id: str | None = None) -> None:
    """Record a skipped line together with the object it came from and how many tokens it had."""
    message = (
        f"Skipped line {exception.number_of_tokens} tokens long from '{exception.source_key}':\n"
        f"{exception.raw_s3_access_log_line}\n\n"
        f"{''.join(traceback.format_exception(exception))}"
    )
    _collect_error(message=message, error_type="line", task_id=task_id)

    return None
