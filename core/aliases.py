# core/aliases.py
import os, logging, yaml
from typing import Dict, Any, Tuple

from .config import ALIASES_PATH

# 每個邏輯欄位的別名順序（先命中者優先）
DEFAULT_ALIASES: Dict[str, Tuple[str, ...]] = {
    "id":             ("id", "event_id", "ID"),
    "category":       ("type", "event_type", "eventType"),
    "description":    ("description", "headline", "desc"),
    "county":         ("county", "County"),
    "route":          ("route", "road_name", "Route"),
    "route_type":     ("route_type", "routeType", "RouteType"),
    "lanes_affected": ("lanes_affected", "lanesAffected", "Lanes"),
    "reporter":       ("reported_by", "reportedBy", "source"),
    "lat":            ("latitude", "lat"),
    "lon":            ("longitude", "lon", "lng"),
    "poi_id":         ("id", "camera_id", "cameraId", "ID"),
    "poi_name":       ("name", "title", "description"),
}

# 找不到任何別名時的顯示值（需與儀表板原本顯示一致）
FIELD_DEFAULTS: Dict[str, str] = {
    "category": "Unknown",
    "description": "No description",
    "county": "--",
    "route": "--",
    "route_type": "--",
    "lanes_affected": "--",
    "reporter": "ARDOT",
}

_state = {"path": ALIASES_PATH, "ts": 0.0, "data": dict(DEFAULT_ALIASES)}

def _load_file(path: str) -> Dict[str, Tuple[str, ...]]:
    data = dict(DEFAULT_ALIASES)
    if not os.path.exists(path):
        return data
    with open(path, "r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}
    if not isinstance(raw, dict):
        logging.warning(f"[aliases] 格式錯誤，忽略：{path}")
        return data
    # 檔案只覆寫有寫到的欄位
    for field, keys in raw.items():
        if isinstance(keys, list) and keys:
            data[str(field)] = tuple(str(k) for k in keys)
    return data

def load(force: bool = False) -> Dict[str, Tuple[str, ...]]:
    """讀取別名表（檔案改動自動重載）。"""
    path = _state["path"]
    ts = os.path.getmtime(path) if os.path.exists(path) else 0.0
    if force or (ts != _state["ts"]):
        _state["data"] = _load_file(path)
        _state["ts"] = ts
    return _state["data"]

def aliases_for(field: str) -> Tuple[str, ...]:
    return load().get(field, (field,))

def pick(d: Dict[str, Any], field: str, default: Any = None) -> Any:
    """依別名順序取第一個非空值（None 與 "" 視為缺值，0 算有值）。"""
    for key in aliases_for(field):
        v = d.get(key)
        if v not in (None, ""):
            return v
    return FIELD_DEFAULTS.get(field) if default is None else default

def reload():
    """手動重載。"""
    load(force=True)
