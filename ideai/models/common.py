import threading
import time
from datetime import datetime, timezone

_EPOCH = datetime.min.replace(tzinfo=timezone.utc)


class MonotonicIds:
    """Millisecond timestamp ids that never repeat within a process."""

    def __init__(self, clock=None):
        self._clock = clock or time.time
        self._last = 0
        self._lock = threading.Lock()

    def __call__(self):
        with self._lock:
            now = int(self._clock() * 1000)
            self._last = now if now > self._last else self._last + 1
            return str(self._last)


new_id = MonotonicIds()


def utc_now_iso():
    # 2024-05-01T12:00:00.000Z
    return datetime.now(timezone.utc).isoformat(timespec='milliseconds').replace('+00:00', 'Z')


def parse_timestamp(value):
    if not isinstance(value, str) or not value:
        return _EPOCH
    try:
        parsed = datetime.fromisoformat(value.replace('Z', '+00:00'))
    except ValueError:
        return _EPOCH
    if parsed.tzinfo is None:
        parsed = parsed.replace(tzinfo=timezone.utc)
    return parsed


def newest_first(records):
    return sorted(records, key=lambda r: parse_timestamp(r.get('createdAt')), reverse=True)
