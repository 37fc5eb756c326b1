"""
In-memory Report Store

Implements ReportRepository port with a time-to-live cache so that a report
rendered by one request can be downloaded by a later one.
"""
import threading
import time
import uuid
from typing import Optional

from ..core.ports import ReportRepository


class TTLCache:
    """Simple time-to-live cache"""
    def __init__(self, ttl_seconds: int = 3600):
        self.ttl = ttl_seconds
        self.cache = {}
        self.timestamps = {}
        self._lock = threading.Lock()

    def get(self, key):
        """Get cached value, or None once it is older than the TTL"""
        with self._lock:
            if key in self.cache:
                age = time.time() - self.timestamps[key]
                if age < self.ttl:
                    return self.cache[key]
                # Too old, remove
                del self.cache[key]
                del self.timestamps[key]
            return None

    def set(self, key, value):
        with self._lock:
            self._evict_expired()
            self.cache[key] = value
            self.timestamps[key] = time.time()

    def _evict_expired(self):
        now = time.time()
        for key in [k for k, ts in self.timestamps.items() if now - ts >= self.ttl]:
            del self.cache[key]
            del self.timestamps[key]


class MemoryReportStore(ReportRepository):
    """Reports kept in process memory, keyed by a random id"""

    def __init__(self, ttl_seconds: int = 3600):
        self.cache = TTLCache(ttl_seconds=ttl_seconds)

    def save(self, report_text: str) -> str:
        report_id = uuid.uuid4().hex
        self.cache.set(report_id, report_text)
        return report_id

    def get(self, report_id: str) -> Optional[str]:
        return self.cache.get(report_id)
