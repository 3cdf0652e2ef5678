"""Stats Schemas — scalar results of database functions."""

from pydantic import BaseModel


class StatsResponse(BaseModel):
    """Number of cars priced strictly below the fleet average."""
    count: int
