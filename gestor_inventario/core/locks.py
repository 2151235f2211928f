"""Candados por clave para serializar mutaciones de stock de un mismo producto."""

import threading
from contextlib import contextmanager
from typing import Dict, Hashable, Iterator


class KeyedLock:
    """Un ``threading.Lock`` por clave, liberado cuando nadie lo usa.

    ``hold`` adquiere varias claves siempre en orden ascendente para que dos
    operaciones sobre los mismos productos no se bloqueen mutuamente.
    """

    def __init__(self):
        self._guard = threading.Lock()
        self._locks: Dict[Hashable, threading.Lock] = {}
        self._users: Dict[Hashable, int] = {}

    def _checkout(self, key) -> threading.Lock:
        with self._guard:
            lock = self._locks.get(key)
            if lock is None:
                lock = self._locks[key] = threading.Lock()
                self._users[key] = 0
            self._users[key] += 1
            return lock

    def _checkin(self, key) -> None:
        with self._guard:
            self._users[key] -= 1
            if self._users[key] == 0:
                del self._users[key]
                del self._locks[key]

    @contextmanager
    def hold(self, *keys) -> Iterator[None]:
        ordered = sorted({k for k in keys if k is not None})
        acquired = []
        try:
            for key in ordered:
                lock = self._checkout(key)
                try:
                    lock.acquire()
                except BaseException:
                    self._checkin(key)
                    raise
                acquired.append((key, lock))
            yield
        finally:
            for key, lock in reversed(acquired):
                lock.release()
                self._checkin(key)

    def __len__(self) -> int:
        with self._guard:
            return len(self._locks)


# Compartido por todas las peticiones del proceso
product_locks = KeyedLock()
