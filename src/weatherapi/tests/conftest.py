# src/weatherapi/tests/conftest.py
from __future__ import annotations
import json
from pathlib import Path
from typing import Any, Dict

import pytest

from weatherapi.core import settings

CASES = Path(__file__).parent / "cases"
TEST_APPID = "test-appid"


def read_case(name: str) -> str:
    return (CASES / name).read_text(encoding="utf-8")


@pytest.fixture(autouse=True)
def api_key(monkeypatch: pytest.MonkeyPatch) -> str:
    monkeypatch.setattr(settings, "OPENWEATHER_API_KEY", TEST_APPID)
    return TEST_APPID


@pytest.fixture
def known_options() -> Dict[str, Any]:
    """case_1.json: 'Hong Kong' 요청 옵션"""
    return json.loads(read_case("case_1.json"))


@pytest.fixture
def get_body() -> str:
    return read_case("case_2.json")


@pytest.fixture
def post_body() -> str:
    return read_case("case_3.json")
