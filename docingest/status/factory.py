from docingest.config.settings import Settings
from docingest.status.base import BaseStatusStore
from docingest.status.memory_store import InMemoryStatusStore
from docingest.status.postgres_store import PostgresStatusStore


class StatusStoreFactory:
    """Creates the job-tracking store selected in settings."""

    STORES: dict[str, type[BaseStatusStore]] = {
        "memory": InMemoryStatusStore,
        "postgres": PostgresStatusStore,
    }

    @classmethod
    def create(cls, settings: Settings) -> BaseStatusStore:
        backend = settings.status_store.lower()
        store_cls = cls.STORES.get(backend)
        if store_cls is None:
            raise ValueError(
                f"Unknown status store '{backend}'. Choose from: {list(cls.STORES)}"
            )
        return store_cls()
