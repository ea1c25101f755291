# core/store.py
import os, json, logging, threading
from typing import Any, Dict

from .config import STATE_PATH


class JsonStore:
    """簡易 key-value 持久層（一個 JSON 檔），取代瀏覽器 localStorage。"""

    def __init__(self, path: str = STATE_PATH):
        self.path = path
        self._lock = threading.Lock()
        self._data: Dict[str, Any] = self._read()

    def _read(self) -> Dict[str, Any]:
        if not self.path or not os.path.exists(self.path):
            return {}
        try:
            with open(self.path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as e:
            logging.warning(f"[store] 讀取失敗，以空狀態啟動：{type(e).__name__}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def get(self, key: str, default: Any = None) -> Any:
        return self._data.get(key, default)

    def set(self, key: str, value: Any) -> None:
        # 同時只有一個寫入者（同一個 .tmp 檔）
        with self._lock:
            data = dict(self._data)
            data[key] = value
            self._data = data
            self._write()

    def _write(self) -> None:
        if not self.path:
            return
        folder = os.path.dirname(self.path)
        if folder:
            os.makedirs(folder, exist_ok=True)
        tmp = self.path + ".tmp"
        with open(tmp, "w", encoding="utf-8") as f:
            json.dump(self._data, f, ensure_ascii=False, indent=2)
        os.replace(tmp, self.path)


class MemoryStore(JsonStore):
    """不落地的版本（測試或唯讀環境用）。"""

    def __init__(self, initial: Dict[str, Any] = None):
        self.path = ""
        self._lock = threading.Lock()
        self._data = dict(initial or {})
