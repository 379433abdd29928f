"""Kernel value types – public re-export surface.

Modules:
  result.py – OperationResult
"""

from paged_cursor.kernel.types.result import OperationResult

__all__ = ["OperationResult"]
