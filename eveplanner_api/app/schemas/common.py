"""
Shared model configuration and response envelopes.

``CamelModel`` is the base for every payload: attributes are
snake_case, JSON keys camelCase, and either spelling is accepted on
input.  Mutations answer with ``{success, message, <id>}``.
"""

from datetime import datetime

from pydantic import BaseModel
from pydantic.alias_generators import to_camel


class CamelModel(BaseModel):
    model_config = {
        "alias_generator": to_camel,
        "populate_by_name": True,
        "from_attributes": True,
    }


class MutationResult(CamelModel):
    """Envelope for successful updates and deletions."""

    success: bool = True
    message: str


class StatisticsRead(CamelModel):
    total_users: int = 0
    total_events: int = 0
    total_files: int = 0


class HealthRead(CamelModel):
    status: str
    timestamp: datetime
