from .advocate_service import AdvocateService, LoadResult

__all__ = ["AdvocateService", "LoadResult"]
