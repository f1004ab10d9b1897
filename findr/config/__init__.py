from .settings import FindConfig

__all__ = ["FindConfig"]
