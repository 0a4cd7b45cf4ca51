"""Учет первых обращений к блокам"""

import threading


class FirstTouchTracker:
    """Общий для всех потоков набор уже прочитанных блоков"""

    def __init__(self):
        self.lock = threading.Lock()
        self.seen = set()

    def mark_and_check(self, file_index: int, block_index: int) -> bool:
        """True только при первом предъявлении ключа за весь запуск"""
        key = (file_index, block_index)
        with self.lock:
            if key in self.seen:
                return False
            self.seen.add(key)
            return True

    def __contains__(self, key) -> bool:
        with self.lock:
            return tuple(key) in self.seen

    def __len__(self) -> int:
        with self.lock:
            return len(self.seen)
