from __future__ import annotations

import logging
import threading
from concurrent.futures import Future, ThreadPoolExecutor
from typing import Any, Optional

from ..core.exceptions import PersistenceError
from .json_file import JsonDocument

logger = logging.getLogger(__name__)

_NOTHING = object()


class WriteBehindWriter:
    """Fire-and-forget persistence of full snapshots of one document.

    Callers hand over a snapshot and return immediately. A single worker
    thread writes snapshots in order; if a write is already scheduled, a newer
    snapshot replaces the pending one, so only the latest state is written.
    Failures are logged and never reach the caller.
    """

    def __init__(self, document: JsonDocument, *, run_async: bool = True):
        self._document = document
        self._lock = threading.Lock()
        self._pending: Any = _NOTHING
        self._scheduled = False
        self._future: Optional[Future] = None
        self._executor: Optional[ThreadPoolExecutor] = None
        if run_async:
            self._executor = ThreadPoolExecutor(max_workers=1, thread_name_prefix=f"persist-{document.name}")

    @property
    def document(self) -> JsonDocument:
        return self._document

    def submit(self, snapshot: Any) -> None:
        if self._executor is None:
            self._write(snapshot)
            return

        with self._lock:
            self._pending = snapshot
            if self._scheduled:
                return
            try:
                self._future = self._executor.submit(self._drain)
            except RuntimeError:
                # Executor already shut down.
                self._pending = _NOTHING
            else:
                self._scheduled = True
                return

        logger.warning("Writer for %s is closed, saving synchronously", self._document.name)
        self._write(snapshot)

    def flush(self) -> None:
        """Block until every submitted snapshot has been written (or failed)."""
        while True:
            with self._lock:
                future = self._future if self._scheduled else None
            if future is None:
                return
            future.result()

    def close(self) -> None:
        self.flush()
        if self._executor is not None:
            self._executor.shutdown(wait=True)

    def _drain(self) -> None:
        try:
            while True:
                with self._lock:
                    snapshot = self._pending
                    self._pending = _NOTHING
                    if snapshot is _NOTHING:
                        self._scheduled = False
                        return
                self._write(snapshot)
        except BaseException:
            with self._lock:
                self._scheduled = False
            raise

    def _write(self, snapshot: Any) -> None:
        try:
            self._document.write(snapshot)
        except PersistenceError as e:
            logger.error(
                "Persistence failed for %s (%s): %s",
                self._document.name, self._document.path, e,
                extra={"document": self._document.name, "path": str(self._document.path)},
            )
