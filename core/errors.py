# core/errors.py


class DashboardError(Exception):
    """所有輪詢/解析錯誤的基底；服務層在此邊界攔截，不往外拋。"""


class NetworkFailure(DashboardError):
    """HTTP 非 2xx 或連線層錯誤。"""

    def __init__(self, url: str, reason: str, status=None):
        self.url = url
        self.status = status
        self.reason = reason
        super().__init__(f"{reason} ({url})" if status is None else f"API error: {status} ({url})")


class ShapeMismatch(DashboardError):
    """回應內容不符合任何已知格式。"""
