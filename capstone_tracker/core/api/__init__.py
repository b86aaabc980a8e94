from capstone_tracker.core.api.base import BaseAPI

__all__ = ["BaseAPI"]
