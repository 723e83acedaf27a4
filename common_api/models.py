# -*- coding: utf-8 -*-
# SPDX-License-Identifier: Apache-2.0

"""
Response bodies and transient values exchanged by the middleware.
"""

from datetime import datetime
from typing import List

from pydantic import BaseModel, ConfigDict, Field


class ErrorReply(BaseModel):
    """Standard JSON error body."""

    status: int = Field(..., ge=100, le=999, description="HTTP status code")
    message: str = Field(..., description="Error message")


class Credentials(BaseModel):
    """Username and password decoded from a Basic Authorization header."""

    model_config = ConfigDict(frozen=True)

    username: str
    password: str


class InfoResponse(BaseModel):
    """Body of the ``/info`` endpoint."""

    model_config = ConfigDict(populate_by_name=True)

    running_since: datetime = Field(..., alias="runningSince", description="Process launch timestamp")
    version: str = Field(..., description="Host project version")
    routes: List[str] = Field(default_factory=list, description="Registered route paths")

    def to_json(self) -> dict:
        """Serialize with wire names and an ISO-8601 timestamp."""
        return self.model_dump(mode="json", by_alias=True)
