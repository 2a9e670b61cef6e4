# ABOUTME: Shared Click options for bookenrich CLI commands.
# ABOUTME: Provides reusable decorators for provider settings backed by environment variables.

import click

from bookenrich.metadata.http import DEFAULT_TIMEOUT

timeout_option = click.option(
    "--timeout",
    type=click.FloatRange(min=0.0, min_open=True),
    default=DEFAULT_TIMEOUT,
    show_default=True,
    envvar="BOOKENRICH_TIMEOUT",
    help="Per-request timeout in seconds (env: BOOKENRICH_TIMEOUT).",
)

google_api_key_option = click.option(
    "--google-api-key",
    default=None,
    envvar="GOOGLE_BOOKS_API_KEY",
    help="Optional Google Books API key (env: GOOGLE_BOOKS_API_KEY).",
)
