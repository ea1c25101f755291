# services/weather_service.py
import logging

from core.config import NWS_OBSERVATION_URL
from core.errors import DashboardError
from core.http_client import http_get_json
from models.weather import WeatherReport
from parsers.weather_parser import parse_observation
from services.session import DashboardSession

NWS_HEADERS = {"User-Agent": "NWA Grid Dashboard", "Accept": "application/geo+json"}

def refresh_weather(session: DashboardSession) -> WeatherReport:
    try:
        data = http_get_json(NWS_OBSERVATION_URL, headers=NWS_HEADERS)
    except DashboardError as e:
        logging.error(f"[weather] 抓取失敗：{e}")
        # 保留上次數值，只把天況換成錯誤
        prev = session.weather or WeatherReport()
        session.weather = prev.model_copy(update={"conditions": "Error", "error": str(e)})
        return session.weather
    session.weather = parse_observation(data)
    logging.info("[weather] Weather updated")
    return session.weather
