# src/weatherapi/core/urls.py
from __future__ import annotations
from typing import Final

from weatherapi.core import settings

# 베이스 도메인은 .env(OPENWEATHER_BASE)로 덮어쓸 수 있게
OPENWEATHER_BASE: Final[str] = settings.OPENWEATHER_BASE

# 경로 상수 (도메인과 분리)
OPENWEATHER_PATHS = {
    # 현재 날씨
    "current": "/data/2.5/weather",
}

def ow_url(path_key: str) -> str:
    """
    OpenWeather endpoint 빌더.
    ex) ow_url("current") -> "http://api.openweathermap.org/data/2.5/weather"
    """
    path = OPENWEATHER_PATHS[path_key]
    return f"{OPENWEATHER_BASE.rstrip('/')}{path}"
