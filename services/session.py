# services/session.py
import time, logging, threading
from typing import Any, FrozenSet, List, Optional, Sequence, Tuple

from core.config import HISTORY_LIMIT, SUPPRESS_MAINTENANCE_DEFAULT, ALERTS_DEFAULT
from core.store import JsonStore
from models.incidents import HistorySample, PointOfInterest
from models.weather import WeatherReport

IGNORED_KEY = "ignoredIds"
HISTORY_KEY = "incidentHistory"


class DashboardSession:
    """
    一個儀表板的全部可變狀態（忽略清單、攝影機快照、上一輪 id、偏好設定、最新結果）。
    每次 pipeline 執行都明確傳入，不用模組層級的全域變數。
    忽略清單與 POI 都是整包替換（tuple / frozenset），讀取端拿到的永遠是一致的快照。
    """

    def __init__(self, store: JsonStore, history_limit: int = HISTORY_LIMIT,
                 suppress_maintenance_like: bool = SUPPRESS_MAINTENANCE_DEFAULT,
                 alerts_enabled: bool = ALERTS_DEFAULT):
        self.store = store
        self._lock = threading.Lock()      # 只保護寫入端；讀取拿整包快照
        self.history_limit = history_limit
        self.suppress_maintenance_like = suppress_maintenance_like
        self.alerts_enabled = alerts_enabled

        self._ignored: Tuple[str, ...] = tuple(str(x) for x in (store.get(IGNORED_KEY) or []))
        self._pois: Tuple[PointOfInterest, ...] = ()
        self._history: Tuple[HistorySample, ...] = self._load_history()

        self.previous_ids: FrozenSet[str] = frozenset()
        self.last_payload: Any = None
        self.incidents = None                    # 最新 PipelineResult
        self.incidents_error: Optional[str] = None
        self.incidents_updated_at: Optional[float] = None
        self.weather: Optional[WeatherReport] = None
        self.cameras_updated_at: Optional[float] = None

    # -----------------------------
    # 忽略清單
    # -----------------------------
    @property
    def ignored_ids(self) -> List[str]:
        return list(self._ignored)

    def ignored_snapshot(self) -> FrozenSet[str]:
        return frozenset(self._ignored)

    def ignore(self, incident_id) -> bool:
        """加入忽略清單；已存在則不動。回傳是否有新增。"""
        sid = str(incident_id)
        with self._lock:
            if sid in self._ignored:
                return False
            self._ignored = self._ignored + (sid,)
            self._persist(IGNORED_KEY, list(self._ignored))
        logging.info(f"[session] ignore id={sid} (total={len(self._ignored)})")
        return True

    def clear_ignored(self) -> None:
        with self._lock:
            self._ignored = ()
            self._persist(IGNORED_KEY, [])
        logging.info("[session] 清除忽略清單")

    # -----------------------------
    # 攝影機（POI）
    # -----------------------------
    @property
    def pois(self) -> Tuple[PointOfInterest, ...]:
        return self._pois

    def replace_pois(self, pois: Sequence[PointOfInterest]) -> None:
        self._pois = tuple(pois)
        self.cameras_updated_at = time.time()

    # -----------------------------
    # 事件數量歷史（保留最近 N 筆）
    # -----------------------------
    def _load_history(self) -> Tuple[HistorySample, ...]:
        out = []
        for rec in self.store.get(HISTORY_KEY) or []:
            try:
                out.append(HistorySample(**rec))
            except (TypeError, ValueError):
                continue
        return tuple(out[-self.history_limit:])

    def record_history(self, count: int, timestamp: Optional[float] = None) -> None:
        sample = HistorySample(timestamp=time.time() if timestamp is None else timestamp, count=count)
        with self._lock:
            self._history = (self._history + (sample,))[-self.history_limit:]
            self._persist(HISTORY_KEY, [s.model_dump() for s in self._history])

    def history(self) -> List[HistorySample]:
        return list(self._history)

    def _persist(self, key: str, value) -> None:
        # 寫檔失敗只記錄，不影響記憶體內狀態
        try:
            self.store.set(key, value)
        except OSError as e:
            logging.error(f"[store] 寫入 {key} 失敗：{type(e).__name__}: {e}")
