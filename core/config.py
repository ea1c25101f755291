# core/config.py
import os
from dotenv import load_dotenv, find_dotenv
from .endpoints import ENDPOINTS

load_dotenv(find_dotenv(filename=".env", usecwd=True), override=False)

def _env_bool(name: str, default: str) -> bool:
    return os.getenv(name, default).strip().lower() in ("1", "true", "yes", "on")

# 氣象站 / 首頁座標
NWS_STATION = os.getenv("NWS_STATION", "KASG")
HOME_LAT = float(os.getenv("HOME_LAT", "36.1867"))
HOME_LON = float(os.getenv("HOME_LON", "-94.1288"))

# 各計時器週期（秒）
REFRESH_WEATHER_SEC = float(os.getenv("REFRESH_WEATHER_SEC", str(5 * 60)))
REFRESH_INCIDENTS_SEC = float(os.getenv("REFRESH_INCIDENTS_SEC", "30"))
REFRESH_CAMERAS_SEC = float(os.getenv("REFRESH_CAMERAS_SEC", str(10 * 60)))

# Timeouts；重試交給下一次輪詢，預設 0
DEFAULT_TIMEOUT = float(os.getenv("HTTP_TIMEOUT", "6.0"))
RETRY_TOTAL = int(os.getenv("HTTP_RETRY_TOTAL", "0"))
USER_AGENT = os.getenv("HTTP_USER_AGENT", "NWA Grid Dashboard")

# 狀態檔（ignoredIds / incidentHistory）
STATE_PATH = os.getenv("STATE_PATH", os.path.join(os.getcwd(), "dashboard_state.json"))
HISTORY_LIMIT = int(os.getenv("HISTORY_LIMIT", "20"))

# 使用者偏好預設值
SUPPRESS_MAINTENANCE_DEFAULT = _env_bool("SUPPRESS_MAINTENANCE_DEFAULT", "true")
ALERTS_DEFAULT = _env_bool("ALERTS_DEFAULT", "false")

# 欄位別名覆寫檔（可選）
ALIASES_PATH = os.getenv("ALIASES_PATH", os.path.join(os.getcwd(), "aliases", "aliases.yml"))

# 攝影機數量取不到時的顯示值
CAMERA_COUNT_FALLBACK = os.getenv("CAMERA_COUNT_FALLBACK", "~547")

# URL 由 endpoints.py 統一控管
NWS_API_BASE = ENDPOINTS["weather"]["nws_base"]
NWS_OBSERVATION_URL = NWS_API_BASE + ENDPOINTS["weather"]["observation_path"].format(station=NWS_STATION)
INCIDENTS_URL = ENDPOINTS["incidents"]
CAMERAS_URL = ENDPOINTS["cameras"]
INCIDENT_MAP_URL = ENDPOINTS["incident_map"]
SPC_OUTLOOK_URL = ENDPOINTS["spc_outlook"]
NWS_RADAR_URL = ENDPOINTS["nws_radar"]

# 服務
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8108"))

# Log / 輪詢開關
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()
LOG_FILE = os.getenv("LOG_FILE", "service.log")
POLLING_ENABLED = _env_bool("POLLING_ENABLED", "true")
