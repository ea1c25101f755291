# parsers/cameras_parser.py
import logging
from typing import Any, Dict, List

from core.aliases import pick
from core.errors import ShapeMismatch
from models.incidents import PointOfInterest
from parsers.incidents_parser import parse_location, unwrap_payload

def normalize_camera(d: Dict[str, Any]) -> PointOfInterest:
    cid = pick(d, "poi_id")
    name = pick(d, "poi_name")
    return PointOfInterest(
        id=None if cid is None else str(cid),
        name=name if isinstance(name, str) else None,     # 物件型的欄位不當名稱
        location=parse_location(d),
        raw=d,
    )

def parse_cameras_payload(payload: Any) -> List[PointOfInterest]:
    """攝影機 API 只有兩種格式：平面陣列 / feature collection。"""
    try:
        rows = unwrap_payload(payload, list_key=None)
    except ShapeMismatch as e:
        logging.warning(f"[cameras] {e}")
        return []
    return [normalize_camera(d) for d in rows]
