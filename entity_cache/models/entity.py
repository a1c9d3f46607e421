from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import Any, Optional


class EntityModel(BaseModel):
    """Cached value object. Identity is the id; data is an opaque payload."""
    id: str = Field(..., description="Unique entity identifier")
    data: Optional[str] = Field(None, description="Opaque payload")

    model_config = ConfigDict(frozen=True)

    @field_validator("id")
    @classmethod
    def id_not_blank(cls, value: str) -> str:
        if not value or not value.strip():
            raise ValueError("id must not be blank")
        return value

    def __str__(self) -> str:
        return f"EntityModel(id='{self.id}', data='{self.data}')"


class ApiResponse(BaseModel):
    """Uniform API response envelope"""
    status: str  # SUCCESS / ERROR
    message: str
    data: Optional[Any] = None
    code: int  # HTTP status code

    @classmethod
    def success(cls, message: str, data: Any = None, code: int = 200) -> "ApiResponse":
        return cls(status="SUCCESS", message=message, data=data, code=code)

    @classmethod
    def error(cls, message: str, code: int) -> "ApiResponse":
        return cls(status="ERROR", message=message, data=None, code=code)
