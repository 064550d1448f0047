"""Parallel execution of shape measure searches."""

from .shape_worker_pool import ShapeWorkerPool

__all__ = ["ShapeWorkerPool"]
