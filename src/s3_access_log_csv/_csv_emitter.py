import csv
import io

import pandas

from ._globals import _CSV_HEADER, _LOG_RECORD_FIELDS, LogRecord


def write_log_records_to_csv(*, log_records: list[LogRecord], output: io.TextIOBase) -> None:
    """
    Write the log records as a single CSV document with a header row.

    Every value is written as text; fields containing a comma, a quote, or a line break are quoted.
    """
    log_records_table = pandas.DataFrame.from_records(data=log_records, columns=list(_LOG_RECORD_FIELDS))
    log_records_table.columns = list(_CSV_HEADER)

    log_records_table.to_csv(path_or_buf=output, index=False, quoting=csv.QUOTE_MINIMAL, lineterminator="\n")

    return None
