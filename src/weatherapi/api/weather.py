# src/weatherapi/api/weather.py
from typing import Optional

from fastapi import APIRouter, HTTPException, Response
from pydantic import BaseModel

from weatherapi.weather.openweather import fetch_weather, fetch_weather_or_default, submit_weather
from weatherapi.weather.types import NotFound, WeatherResult, WeatherTransportError, build_weather_request

router = APIRouter()


class WeatherBody(BaseModel):
    city: Optional[str] = None


def _to_response(result: WeatherResult, city: Optional[str]) -> Response:
    if isinstance(result, NotFound):
        raise HTTPException(status_code=404, detail=f"도시 없음: {city}")
    # 204/304 는 본문 없이 상태코드만
    if result.status_code in (204, 304):
        return Response(status_code=result.status_code)
    # 업스트림 본문/상태코드 그대로 전달
    return Response(content=result.body, status_code=result.status_code, media_type="application/json")


@router.get("/weather")
async def get_weather(city: Optional[str] = None, fallback: bool = True):
    """
    현재 날씨 조회 API
    - Query: city, fallback (404 시 기본 위치로 재조회, 기본 True)
    """
    config = build_weather_request(city)
    try:
        if fallback:
            result = await fetch_weather_or_default(config)
        else:
            result = await fetch_weather(config)
    except WeatherTransportError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _to_response(result, city)


@router.post("/weather")
async def post_weather(body: WeatherBody):
    config = build_weather_request(body.city)
    try:
        result = await submit_weather(config)
    except WeatherTransportError as e:
        raise HTTPException(status_code=502, detail=str(e))
    return _to_response(result, body.city)
