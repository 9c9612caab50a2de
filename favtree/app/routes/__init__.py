"""
FastAPI Routes.

단일 catch-all 라우트 (판정은 RequestPipeline)
"""

from . import tree

__all__ = ["tree"]
