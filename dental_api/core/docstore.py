import logging
import threading
from fastapi import Request
from tinydb import TinyDB
from tinydb.storages import MemoryStorage
from tinydb.table import Table

logger = logging.getLogger(__name__)


class DocumentStore:
    """
    Owned handle on the embedded patient database.

    Opened by the application lifespan and closed on shutdown. Every table
    access should hold ``lock``; TinyDB itself does no locking.
    """

    def __init__(self, path: str | None = None, in_memory: bool = False):
        self.path = path
        self.in_memory = in_memory
        self.lock = threading.RLock()
        self.db: TinyDB | None = None

    def open(self) -> "DocumentStore":
        if self.db is not None:
            return self
        if self.in_memory:
            self.db = TinyDB(storage=MemoryStorage)
        else:
            self.db = TinyDB(self.path, ensure_ascii=False, encoding="utf-8")
        logger.info(f"Opened document store at {self.path if not self.in_memory else ':memory:'}")
        return self

    def close(self):
        with self.lock:
            if self.db is not None:
                self.db.close()
                self.db = None

    def table(self, name: str) -> Table:
        if self.db is None:
            raise RuntimeError("Document store is not open")
        return self.db.table(name)

    def __enter__(self) -> "DocumentStore":
        return self.open()

    def __exit__(self, *exc):
        self.close()


def get_document_store(request: Request) -> DocumentStore:
    return request.app.state.document_store
