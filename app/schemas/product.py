"""
Products API: Pydantic Request/Response Schemas
===============================================

What:  Pydantic models defining the API contract for the products resource.
How:   FastAPI parses request bodies into these models, serializes responses
       through them, and generates the OpenAPI document from them.

Request bodies are parsed leniently: every business field is optional so
that missing or empty fields reach the product validator and come back as a
400 field-error map. Only bodies of the wrong JSON shape are rejected by
FastAPI itself (422).
"""

from datetime import datetime
from typing import Any, Dict, Optional, Union

from pydantic import BaseModel, Field


# ══════════════════════════════════════════════════════════════════════════
# Request Models
# ══════════════════════════════════════════════════════════════════════════


class ProductCandidate(BaseModel):
    """
    What:  Client-supplied, not-yet-validated product fields.
    Who:   Body of POST /api/products and PUT /api/products/{id}.

    Unknown keys (including a client-sent `id` or `created_at`) are ignored.
    """
    name: Optional[str] = Field(default=None, description="Product name")
    brand: Optional[str] = Field(default=None, description="Brand name")
    category: Optional[str] = Field(default=None, description="Category name")
    price: Optional[Union[float, str]] = Field(
        default=None,
        description="Price as a number (numeric strings are accepted)",
    )
    description: Optional[str] = Field(default=None, description="Free-text description")

    def as_record(self) -> Dict[str, Any]:
        """The candidate as a plain field → raw value mapping."""
        return self.model_dump()


# ══════════════════════════════════════════════════════════════════════════
# Response Models
# ══════════════════════════════════════════════════════════════════════════


class ProductResponse(BaseModel):
    """
    What:  A persisted product exactly as stored.
    Who:   Returned by list, get, create and update.
    """
    id: int = Field(description="Store-assigned identifier")
    name: str
    brand: str
    category: str
    price: float
    description: str
    created_at: datetime = Field(description="Creation timestamp (ISO 8601)")

    model_config = {"from_attributes": True}


class MessageResponse(BaseModel):
    """
    What:  `{message}` body used by delete confirmations and 500 errors.

    Example:
        {"message": "Product with ID 5 deleted successfully"}
    """
    message: str


class HealthResponse(BaseModel):
    """Health check response showing service and database status."""
    status: str = Field(description="Overall service status: healthy, unhealthy")
    version: str = Field(description="Application version")
    database: str = Field(description="Database connectivity: connected, disconnected")
    uptime_seconds: float = Field(description="Seconds since service started")

