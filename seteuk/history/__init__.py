from seteuk.history.store import DEFAULT_MAX_ITEMS, HistoryStore

__all__ = ["DEFAULT_MAX_ITEMS", "HistoryStore"]
