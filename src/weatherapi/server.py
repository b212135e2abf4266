from fastapi import FastAPI
from weatherapi.api import health, weather


def create_app() -> FastAPI:
    app = FastAPI(title="OpenWeather Client API")

    # ============================================================
    # 📦 라우터 등록
    # ============================================================
    app.include_router(weather.router, prefix="/api")
    app.include_router(health.router)

    return app


# ✅ 앱 인스턴스 생성
app = create_app()
