from namecase.utils.last_cache import LastCache, last

__all__ = ["LastCache", "last"]
