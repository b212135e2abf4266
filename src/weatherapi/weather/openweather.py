# src/weatherapi/weather/openweather.py
from __future__ import annotations
from typing import Optional

import httpx

from weatherapi.core import settings
from weatherapi.utils.logger import setup_logger
from weatherapi.weather.types import (
    DEFAULT_LOCATION,
    NOT_FOUND,
    NotFound,
    Found,
    RequestConfig,
    WeatherResult,
    WeatherTransportError,
)

logger = setup_logger(__name__)


async def _request(method: str, config: RequestConfig, client: Optional[httpx.AsyncClient]) -> httpx.Response:
    logger.debug("%s %s q=%r", method, config.endpoint_url, config.query.location_name)
    try:
        if client is not None:
            return await client.request(method, config.endpoint_url, params=config.params())
        async with httpx.AsyncClient(timeout=settings.OPENWEATHER_TIMEOUT) as own_client:
            return await own_client.request(method, config.endpoint_url, params=config.params())
    except httpx.RequestError as e:
        logger.error("%s %s 전송 실패: %s", method, config.endpoint_url, e)
        raise WeatherTransportError(f"{method} {config.endpoint_url} failed: {e}") from e


def _found(method: str, r: httpx.Response) -> Found:
    # 404 외 상태코드는 검증 없이 본문 그대로 통과
    if not r.is_success:
        logger.warning("%s 응답 status=%s 본문 그대로 반환", method, r.status_code)
    return Found(body=r.text, status_code=r.status_code)


async def fetch_weather(config: RequestConfig, *, client: Optional[httpx.AsyncClient] = None) -> WeatherResult:
    """
    GET 으로 현재 날씨 조회.
    - 404 → NOT_FOUND (예외 없음, 호출측에서 fallback 처리)
    - 그 외 → Found(원문 본문)
    - 네트워크 오류 → WeatherTransportError
    """
    r = await _request("GET", config, client)
    if r.status_code == 404:
        logger.info("GET 404: q=%r 없음", config.query.location_name)
        return NOT_FOUND
    return _found("GET", r)


async def submit_weather(config: RequestConfig, *, client: Optional[httpx.AsyncClient] = None) -> WeatherResult:
    """POST 버전. 404 도 로그 남기고 NOT_FOUND 로 반드시 종료."""
    r = await _request("POST", config, client)
    if r.status_code == 404:
        logger.error("ERROR 404: Page Not Found")
        return NOT_FOUND
    return _found("POST", r)


async def fetch_weather_or_default(
    config: RequestConfig,
    *,
    fallback: RequestConfig = DEFAULT_LOCATION,
    client: Optional[httpx.AsyncClient] = None,
) -> WeatherResult:
    result = await fetch_weather(config, client=client)
    if isinstance(result, NotFound):
        logger.info("q=%r 없음 → 기본 위치로 재조회", config.query.location_name)
        return await fetch_weather(fallback, client=client)
    return result
