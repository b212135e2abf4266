# src/weatherapi/weather/types.py
from __future__ import annotations
import json
from dataclasses import dataclass
from typing import Any, Dict, Optional, Union

from weatherapi.core import settings
from weatherapi.core.urls import ow_url


@dataclass(frozen=True)
class WeatherQuery:
    location_name: Optional[str]
    credential: str


@dataclass(frozen=True)
class RequestConfig:
    """
    날씨 조회 1건을 설명하는 요청 옵션 (URL + 쿼리).
    생성 후 변경 불가. GET/POST 래퍼가 그대로 읽어서 사용.
    """
    endpoint_url: str
    query: WeatherQuery

    def params(self) -> Dict[str, str]:
        # q=None 이면 빈 값으로 전송
        return {
            "q": self.query.location_name if self.query.location_name is not None else "",
            "appid": self.query.credential,
        }

    def to_dict(self) -> Dict[str, Any]:
        return {
            "url": self.endpoint_url,
            "qs": {"q": self.query.location_name, "appid": self.query.credential},
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "RequestConfig":
        qs = data.get("qs") or {}
        return cls(
            endpoint_url=data["url"],
            query=WeatherQuery(location_name=qs.get("q"), credential=qs.get("appid", "")),
        )


def build_weather_request(city: Optional[str] = None, *, api_key: Optional[str] = None) -> RequestConfig:
    """
    도시 이름 하나로 현재 날씨 요청 옵션을 만든다.
    검증 없음: 빈 문자열/None 도 그대로 전달. I/O 없음.
    """
    return RequestConfig(
        endpoint_url=ow_url("current"),
        query=WeatherQuery(
            location_name=city,
            credential=api_key if api_key is not None else settings.OPENWEATHER_API_KEY,
        ),
    )


@dataclass(frozen=True)
class Found:
    body: str
    status_code: int = 200

    def json(self) -> Any:
        return json.loads(self.body)


@dataclass(frozen=True)
class NotFound:
    status_code: int = 404


NOT_FOUND = NotFound()

WeatherResult = Union[Found, NotFound]


class WeatherTransportError(RuntimeError):
    """네트워크/DNS/타임아웃 등 전송 단계 실패"""


# 위치 없이 만든 기본(홈) 요청. 프로세스 시작 시 한 번만 생성
DEFAULT_LOCATION = build_weather_request()
