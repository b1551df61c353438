"""Base model class for lombokgen models with serialization support."""

from typing import Any, Dict
from pydantic import BaseModel, ConfigDict


class LombokGenBaseModel(BaseModel):
    """Base model for all lombokgen models with built-in serialization."""
    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True
    )

    def to_dict(self) -> Dict[str, Any]:
        """Convert model to dictionary for serialization."""
        return self.model_dump(by_alias=False, exclude_none=True)
