# parsers/incidents_parser.py
import logging, uuid
from typing import Any, Dict, List, Optional

from core.aliases import pick
from core.errors import ShapeMismatch
from core.geo import safe_float, valid_coords
from models.incidents import IncidentRecord, Location, RouteInfo

def _flatten_feature(f: Dict[str, Any]) -> Dict[str, Any]:
    """GeoJSON feature → 平面 dict；coordinates 為 [lon, lat]。"""
    # properties / geometry 不是物件就當作空的
    props = f.get("properties")
    geom = f.get("geometry")
    d = dict(props) if isinstance(props, dict) else {}
    coords = geom.get("coordinates") if isinstance(geom, dict) else None
    if isinstance(coords, (list, tuple)) and len(coords) >= 2:
        d["latitude"] = coords[1]
        d["longitude"] = coords[0]
    return d

def unwrap_payload(payload: Any, list_key: Optional[str] = "events") -> List[Dict[str, Any]]:
    """
    支援三種格式：
      (a) [ {...}, {...} ]
      (b) {"features": [ {geometry, properties}, ... ]}
      (c) {"events": [ ... ]}（list_key 指定的包裝欄位）
    其他格式丟 ShapeMismatch。
    """
    if isinstance(payload, list):
        rows = payload
    elif isinstance(payload, dict) and isinstance(payload.get("features"), list):
        rows = [_flatten_feature(f) for f in payload["features"] if isinstance(f, dict)]
    elif list_key and isinstance(payload, dict) and isinstance(payload.get(list_key), list):
        rows = payload[list_key]
    else:
        raise ShapeMismatch(f"unrecognized payload shape: {type(payload).__name__}")
    return [r for r in rows if isinstance(r, dict)]

def parse_location(d: Dict[str, Any]) -> Optional[Location]:
    lat = safe_float(pick(d, "lat"))
    lon = safe_float(pick(d, "lon"))
    if not valid_coords(lat, lon):
        return None
    return Location(lat=lat, lon=lon)

def _text(v: Any) -> str:
    return v if isinstance(v, str) else str(v)

def normalize_event(d: Dict[str, Any]) -> IncidentRecord:
    raw_id = pick(d, "id")
    iid = None if raw_id is None else _text(raw_id)
    return IncidentRecord(
        id=iid,
        display_key=iid if iid is not None else uuid.uuid4().hex[:9],
        category=_text(pick(d, "category")),
        description=_text(pick(d, "description")),
        county=_text(pick(d, "county")),
        location=parse_location(d),
        route_info=RouteInfo(
            route=_text(pick(d, "route")),
            route_type=_text(pick(d, "route_type")),
            lanes_affected=_text(pick(d, "lanes_affected")),
            reporter=_text(pick(d, "reporter")),
        ),
        raw=d,
    )

def parse_events_payload(payload: Any) -> List[IncidentRecord]:
    """事件 API 回應 → IncidentRecord 清單；不認得的格式回空清單，不拋例外。"""
    try:
        rows = unwrap_payload(payload, "events")
    except ShapeMismatch as e:
        logging.warning(f"[incidents] {e}")
        return []
    return [normalize_event(d) for d in rows]
