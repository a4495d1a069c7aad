"""
Base model for all stored well entities.

Provides the common identity and timestamp fields.
"""

from datetime import datetime, timezone
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class DataModel(BaseModel):
    """
    Base model for stored well records.

    Provides:
    - Unique ID field
    - Creation timestamp
    - JSON serialization config
    """

    model_config = ConfigDict(
        # Validate on assignment
        validate_assignment=True,
        # Populate by field name or alias
        populate_by_name=True,
    )

    # Unique record identifier (set by the assembler or the database)
    id: Optional[str] = Field(default=None)

    created_at: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return self.model_dump(exclude_none=True)
