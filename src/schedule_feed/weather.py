"""Fetch today's weather summary for the display widget.

Independent of the schedule feed: it only shares config, logging and the
output directory. Writes weather.json with the day's max temperature and
main condition.

Run with: fetch-weather
Requires: OPENWEATHER_API_KEY (environment or .env)

Exit codes:
  0 = success (weather.json written)
  1 = error (missing credential, API failure, write failure)
"""

import argparse
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Any

import requests
from pydantic import BaseModel
from tenacity import (
    retry,
    retry_if_exception_type,
    stop_after_attempt,
    wait_fixed,
)

from schedule_feed.config import FeedConfig, get_config
from schedule_feed.errors import (
    FeedError,
    MissingCredentialError,
    TransientWeatherError,
    WeatherAPIError,
)
from schedule_feed.logging import get_logger, setup_logging

log = get_logger(__name__)

ONECALL_URL = "https://api.openweathermap.org/data/3.0/onecall"

# Statuses worth another attempt
_TRANSIENT_STATUSES = frozenset({429, 500, 502, 503, 504})


class WeatherSummary(BaseModel):
    max_temp: float | None = None
    condition: str = ""


class OpenWeatherClient:
    """Narrow client for the OpenWeather One Call 3.0 API.

    Args:
        api_key: OpenWeather API key.
        lat: Latitude of the forecast location.
        lon: Longitude of the forecast location.
        units: "metric", "imperial" or "standard".
        session: requests.Session (or compatible) to send requests with.
        timeout: Per-request timeout in seconds.
    """

    def __init__(
        self,
        api_key: str,
        lat: float,
        lon: float,
        units: str = "metric",
        session: requests.Session | None = None,
        timeout: float = 10.0,
    ) -> None:
        if not api_key:
            raise MissingCredentialError("Missing OPENWEATHER_API_KEY")
        self.api_key = api_key
        self.lat = lat
        self.lon = lon
        self.units = units
        self.session = session or requests.Session()
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: FeedConfig, **kwargs: Any) -> "OpenWeatherClient":
        return cls(
            config.openweather_api_key,
            config.weather_lat,
            config.weather_lon,
            units=config.weather_units,
            **kwargs,
        )

    @retry(
        stop=stop_after_attempt(3),
        wait=wait_fixed(1),
        retry=retry_if_exception_type(TransientWeatherError),
        reraise=True,
    )
    def fetch_daily_summary(self) -> WeatherSummary:
        """Fetch today's max temperature and main condition.

        Retries on TransientWeatherError but fails fast on WeatherAPIError.

        Raises:
            TransientWeatherError: Network failure or retryable status, after retries.
            WeatherAPIError: Any other non-success response, or a body that isn't
                the expected JSON.
        """
        params = {
            "lat": self.lat,
            "lon": self.lon,
            "exclude": "minutely,hourly,alerts",
            "units": self.units,
            "appid": self.api_key,
        }
        try:
            resp = self.session.get(ONECALL_URL, params=params, timeout=self.timeout)
        except requests.RequestException as e:
            log.warning("weather_request_failed", error=str(e))
            raise TransientWeatherError(f"OpenWeather request failed: {e}") from e

        if resp.status_code in _TRANSIENT_STATUSES:
            log.warning("weather_api_retryable", status=resp.status_code)
            raise TransientWeatherError(f"OpenWeather error: {resp.status_code}")
        if resp.status_code != 200:
            log.error("weather_api_error", status=resp.status_code)
            raise WeatherAPIError(f"OpenWeather error: {resp.status_code} {resp.reason}")

        try:
            return parse_daily_summary(resp.json())
        except ValueError as e:
            log.error("weather_response_invalid", error=str(e))
            raise WeatherAPIError(f"Unexpected OpenWeather response: {e}") from e


def parse_daily_summary(data: Any) -> WeatherSummary:
    """Pull daily[0].temp.max and daily[0].weather[0].main, tolerating gaps.

    Raises:
        ValueError: If temp.max is present but not a number.
    """

    def _object(value: Any) -> dict[str, Any]:
        return value if isinstance(value, dict) else {}

    def _first(value: Any) -> Any:
        return value[0] if isinstance(value, list) and value else None

    first = _object(_first(_object(data).get("daily")))
    temp = _object(first.get("temp"))
    condition = _object(_first(first.get("weather"))).get("main")
    return WeatherSummary(
        max_temp=temp.get("max"),
        condition=condition if isinstance(condition, str) else "",
    )


def weather_payload(summary: WeatherSummary, now: datetime | None = None) -> dict[str, Any]:
    """Shape the summary the way the widget reads it (daily[0].temp.max)."""
    now = now or datetime.now(timezone.utc)
    return {
        "daily": [
            {
                "temp": {"max": summary.max_temp},
                "weather": [{"main": summary.condition}],
            }
        ],
        "updated_at": now.isoformat(),
    }


def main(argv: list[str] | None = None) -> int:
    parser = argparse.ArgumentParser(description="Fetch today's weather into weather.json.")
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory to write weather.json into (default: the feed output dir).",
    )
    args = parser.parse_args(argv)

    config = get_config()
    setup_logging(json_output=config.log_json, log_level=config.log_level)

    try:
        client = OpenWeatherClient.from_config(config)
        summary = client.fetch_daily_summary()
        out_path = Path(args.output_dir or config.output_dir) / config.weather_file
        out_path.parent.mkdir(parents=True, exist_ok=True)
        out_path.write_text(
            json.dumps(weather_payload(summary), indent=2) + "\n", encoding="utf-8"
        )
    except (FeedError, OSError) as e:
        log.error("fetch_weather_failed", error=str(e))
        return 1

    log.info("weather_written", path=str(out_path), max_temp=summary.max_temp)
    return 0


if __name__ == "__main__":
    sys.exit(main())
