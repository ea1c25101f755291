# app.py
import asyncio, logging, time, traceback
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from core.config import (
    HOST, PORT, STATE_PATH, LOG_LEVEL, LOG_FILE, POLLING_ENABLED,
    REFRESH_WEATHER_SEC, REFRESH_INCIDENTS_SEC, REFRESH_CAMERAS_SEC,
)
from core.store import JsonStore
from routers.dashboard import router as dashboard_router
from services.cameras_service import refresh_cameras
from services.incidents_service import refresh_incidents
from services.session import DashboardSession
from services.weather_service import refresh_weather

def setup_logging():
    handlers = [logging.StreamHandler()]
    if LOG_FILE:
        handlers.insert(0, logging.FileHandler(LOG_FILE, encoding="utf-8"))
    logging.basicConfig(
        level=getattr(logging, LOG_LEVEL, logging.INFO),
        format="%(asctime)s | %(levelname)s | %(message)s",
        handlers=handlers,
    )

# =============================================================================
# 輪詢：各計時器獨立，互不阻塞；單次失敗不會停掉迴圈
# =============================================================================
async def poll_forever(name: str, interval: float, fn, session: DashboardSession):
    loop = asyncio.get_running_loop()
    while True:
        t0 = time.perf_counter()
        try:
            await loop.run_in_executor(None, fn, session)
        except Exception:
            logging.error(f"[{name}] 輪詢例外\n{traceback.format_exc()}")
        logging.debug(f"[{name}] tick {int((time.perf_counter() - t0) * 1000)} ms")
        await asyncio.sleep(interval)

def start_polling(session: DashboardSession):
    # 攝影機先跑，事件的最近攝影機才有資料可比
    jobs = [
        ("cameras", REFRESH_CAMERAS_SEC, refresh_cameras),
        ("weather", REFRESH_WEATHER_SEC, refresh_weather),
        ("incidents", REFRESH_INCIDENTS_SEC, refresh_incidents),
    ]
    return [asyncio.create_task(poll_forever(n, sec, fn, session)) for n, sec, fn in jobs]

@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    if getattr(app.state, "session", None) is None:
        app.state.session = DashboardSession(JsonStore(STATE_PATH))
    tasks = start_polling(app.state.session) if POLLING_ENABLED else []
    logging.info(f"[app] 啟動，polling={'on' if tasks else 'off'} state={STATE_PATH}")
    try:
        yield
    finally:
        for t in tasks:
            t.cancel()
        await asyncio.gather(*tasks, return_exceptions=True)

# =============================================================================
# FastAPI
# =============================================================================
app = FastAPI(lifespan=lifespan)
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"], allow_credentials=True,
    allow_methods=["*"], allow_headers=["*"],
)
app.include_router(dashboard_router)

@app.get("/")
async def root():
    return {"message": "NWA Grid Dashboard API"}

@app.get("/health")
def health():
    session = getattr(app.state, "session", None)
    return {
        "time": time.strftime("%Y-%m-%d %H:%M:%S"),
        "session_ready": session is not None,
        "incidents_updated_at": session.incidents_updated_at if session else None,
        "cameras": len(session.pois) if session else 0,
        "state_path": STATE_PATH,
    }

# =============================================================================
# 啟動
# =============================================================================
if __name__ == "__main__":
    uvicorn.run(app, host=HOST, port=PORT)
