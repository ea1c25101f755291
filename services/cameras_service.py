# services/cameras_service.py
import logging
from typing import List

from core.config import CAMERAS_URL, CAMERA_COUNT_FALLBACK
from core.errors import DashboardError
from core.http_client import http_get_json
from models.incidents import PointOfInterest
from parsers.cameras_parser import parse_cameras_payload
from services.session import DashboardSession

def refresh_cameras(session: DashboardSession) -> List[PointOfInterest]:
    """抓攝影機清單並整包替換 session 的 POI；失敗時沿用舊清單。"""
    try:
        payload = http_get_json(CAMERAS_URL)
    except DashboardError as e:
        logging.error(f"[cameras] 抓取失敗：{e}")
        return list(session.pois)
    pois = parse_cameras_payload(payload)
    session.replace_pois(pois)
    logging.info(f"[cameras] Cameras: {len(pois)}")
    return pois

def camera_count_text(session: DashboardSession) -> str:
    n = len(session.pois)
    return str(n) if n else CAMERA_COUNT_FALLBACK
