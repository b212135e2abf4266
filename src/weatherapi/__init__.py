# src/weatherapi/__init__.py
from weatherapi.weather.openweather import fetch_weather, fetch_weather_or_default, submit_weather
from weatherapi.weather.types import (
    DEFAULT_LOCATION,
    NOT_FOUND,
    Found,
    NotFound,
    RequestConfig,
    WeatherQuery,
    WeatherResult,
    WeatherTransportError,
    build_weather_request,
)

__all__ = [
    "DEFAULT_LOCATION",
    "NOT_FOUND",
    "Found",
    "NotFound",
    "RequestConfig",
    "WeatherQuery",
    "WeatherResult",
    "WeatherTransportError",
    "build_weather_request",
    "fetch_weather",
    "fetch_weather_or_default",
    "submit_weather",
]
