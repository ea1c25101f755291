# services/alerts.py
from typing import AbstractSet, Callable, FrozenSet, Iterable, Optional

from models.incidents import IncidentRecord

AlertCallback = Callable[[FrozenSet[str]], None]

def incident_ids(items: Iterable[IncidentRecord]) -> FrozenSet[str]:
    # 沒有 id 的事件不參與比對
    return frozenset(it.id for it in items if it.id is not None)

def new_incident_ids(previous: AbstractSet[str], current: AbstractSet[str]) -> FrozenSet[str]:
    """
    第一輪（previous 為空）不算新事件。
    以 id 集合差判斷，不用數量比較；數量相同但有替換一樣會觸發。
    """
    if not previous:
        return frozenset()
    return frozenset(current - previous)

def check_new_incidents(previous: AbstractSet[str], current: AbstractSet[str],
                        enabled: bool, alert: Optional[AlertCallback] = None) -> bool:
    fresh = new_incident_ids(previous, current)
    if not fresh or not enabled:
        return False
    if alert is not None:
        alert(fresh)
    return True
