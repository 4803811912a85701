"""Pydantic schemas for API responses."""

from pydantic import BaseModel, Field
from typing import Optional
from datetime import datetime


class ForwardedResponse(BaseModel):
    """Forwarding information extracted from the request headers."""

    by: str = Field("", description="Intermediary (proxy) address")
    for_: str = Field("", alias="for", description="Originating client address")
    host: str = Field("", description="Original Host requested by the client")
    proto: str = Field("", description="Original protocol (http/https)")
    client: Optional[str] = Field(None, description="Peer address seen by the app after rewriting")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "by": "203.0.113.60",
                    "for": "192.0.2.43",
                    "host": "example.com",
                    "proto": "http",
                    "client": "192.0.2.43",
                }
            ]
        }
    }


class HealthResponse(BaseModel):
    """Health check response."""

    status: str = Field(..., description="Overall health status")
    timestamp: datetime = Field(..., description="Check timestamp")
