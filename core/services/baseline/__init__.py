from .service import BaselineService

__all__ = ["BaselineService"]
