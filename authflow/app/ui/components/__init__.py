from .header import build_header

__all__ = ["build_header"]
