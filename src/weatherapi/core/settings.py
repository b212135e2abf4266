# src/weatherapi/core/settings.py
from __future__ import annotations
import os
from dotenv import load_dotenv

# .env 파일에서 환경 변수 로드
load_dotenv()

# 인증키는 소스에 박지 않고 .env / 환경변수로만 주입
OPENWEATHER_API_KEY = os.getenv("OPENWEATHER_API_KEY", "")

OPENWEATHER_TIMEOUT = float(os.getenv("OPENWEATHER_TIMEOUT", "7.0"))

LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

OPENWEATHER_BASE = os.getenv("OPENWEATHER_BASE", "http://api.openweathermap.org")
