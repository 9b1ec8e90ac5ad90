"""描画ごとに一意な gradient / clipPath の id を払い出す"""
import itertools
import threading
from typing import Tuple

GRADIENT_PREFIX = "pg-grad-"
CLIP_PREFIX = "pg-bars-clip-"


class IdGenerator:
    """単調増加カウンタ。複数スレッドから同時に呼ばれても重複しない"""

    def __init__(self, start: int = 1):
        self._counter = itertools.count(start)
        self._lock = threading.Lock()

    def next_uid(self) -> int:
        with self._lock:
            return next(self._counter)

    def next_ids(self) -> Tuple[str, str]:
        uid = self.next_uid()
        return f"{GRADIENT_PREFIX}{uid}", f"{CLIP_PREFIX}{uid}"


# プロセス全体で共有するデフォルト
default_id_generator = IdGenerator()
