"""
Pagination bounds for list endpoints.
"""

from __future__ import annotations
from typing import Optional

from pydantic import BaseModel, Field

from ..parameters import Parameters


class Range(BaseModel):
    """
    Optional bounds for a paginated request.

    Also used as the cursor for the next/previous page of a Pageable.
    """
    max_id: Optional[str] = Field(default=None, description="Return results older than this id")
    min_id: Optional[str] = Field(default=None, description="Return results immediately newer than this id")
    since_id: Optional[str] = Field(default=None, description="Return results newer than this id")
    limit: Optional[int] = Field(default=None, ge=1, description="Maximum number of results")

    model_config = {"frozen": True}

    def to_parameters(self) -> Parameters:
        """Convert the bounds that are set into request parameters."""
        parameters = Parameters()
        if self.max_id is not None:
            parameters.append("max_id", self.max_id)
        if self.min_id is not None:
            parameters.append("min_id", self.min_id)
        if self.since_id is not None:
            parameters.append("since_id", self.since_id)
        if self.limit is not None:
            parameters.append("limit", self.limit)
        return parameters


__all__ = ["Range"]
