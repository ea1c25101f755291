# services/filters.py
from typing import AbstractSet, List, Tuple

from models.incidents import IncidentRecord

# 「養護類」關鍵字：施工 / 維修 / 橋梁
MAINTENANCE_KEYWORDS: Tuple[str, ...] = ("construction", "maintenance", "bridge")

def is_maintenance_like(it: IncidentRecord) -> bool:
    fields = (it.category, it.description, it.route_info.route_type)
    for text in fields:
        t = (text or "").lower()
        if any(k in t for k in MAINTENANCE_KEYWORDS):
            return True
    return False

def is_ignored(it: IncidentRecord, ignored: AbstractSet[str]) -> bool:
    return str(it.id if it.id is not None else "") in ignored

def filter_incidents(items: List[IncidentRecord], ignored: AbstractSet[str],
                     suppress_maintenance_like: bool) -> List[IncidentRecord]:
    """移除使用者忽略的事件；必要時再移除養護類事件。保持原順序、不改輸入。"""
    def ok(it: IncidentRecord) -> bool:
        if is_ignored(it, ignored):
            return False
        if suppress_maintenance_like and is_maintenance_like(it):
            return False
        return True

    return [x for x in items if ok(x)]
