"""Queries - Read operations that fetch data.

Queries represent a request for information. They are immutable dataclasses
with question-like names (GetAssignor, GetPayable).

Each query has a corresponding handler that fetches and returns the requested
data. Queries NEVER change state.
"""

from src.application.queries.assignor_queries import GetAssignor
from src.application.queries.payable_queries import GetPayable

__all__ = [
    "GetAssignor",
    "GetPayable",
]
