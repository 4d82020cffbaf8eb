"""Error hierarchy for the feed builder and the weather fetcher.

Recoverable input problems (missing files, a bad --date value, a weekday
without rules) are logged and degraded, never raised. Only the failures
below end a run.
"""


class FeedError(Exception):
    """Base exception for all feed errors."""

    pass


class FeedWriteError(FeedError):
    """Output directory or output file could not be written.

    Fatal: the run exits non-zero and no half-written output is left behind.
    """

    pass


class WeatherError(FeedError):
    """Base exception for weather fetch failures."""

    pass


class TransientWeatherError(WeatherError):
    """Temporary failure that may succeed on retry.

    Examples: connection errors, timeouts, 429 Too Many Requests, 5xx responses.
    """

    pass


class WeatherAPIError(WeatherError):
    """Non-success response that won't succeed on retry (e.g. 401, 404)."""

    pass


class MissingCredentialError(WeatherError):
    """OPENWEATHER_API_KEY is not configured."""

    pass
