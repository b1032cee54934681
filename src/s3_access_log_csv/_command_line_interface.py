"""Call the S3 access log harvester from the command line."""

import click

from ._config import _CSV_USAGE_MESSAGE
from ._s3_access_log_harvester import harvest_s3_access_logs_to_csv


# No options at all, not even --help: every token, including ones starting with "-", is a positional argument
@click.command(
    name="s3_access_logs_to_csv",
    context_settings=dict(ignore_unknown_options=True, help_option_names=[]),
)
@click.argument("arguments", nargs=-1, metavar="ACCESS_KEY_ID SECRET_ACCESS_KEY REGION BUCKET PREFIX")
@click.pass_context
def _harvest_s3_access_logs_to_csv_cli(context: click.Context, arguments: tuple[str, ...]) -> None:
    """Write every S3 access log line under BUCKET/PREFIX to standard output as CSV."""
    # Exactly five positional arguments; anything else is a usage error with exit code 1
    if len(arguments) != 5:
        click.echo(message=_CSV_USAGE_MESSAGE, err=True)
        context.exit(1)

    access_key_id, secret_access_key, region, bucket, prefix = arguments
    harvest_s3_access_logs_to_csv(
        bucket=bucket,
        prefix=prefix,
        access_key_id=access_key_id,
        secret_access_key=secret_access_key,
        region=region,
    )

    return None
