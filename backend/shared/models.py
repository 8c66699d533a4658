"""
Shared data models used across modules.

Every call to the church backend answers with the same envelope:
``{success, message, data, errors, pagination}``. The envelope is generic
over its ``data`` payload so each resource client can declare what it
expects back from a given endpoint.
"""

from typing import Any, Generic, Optional, TypeVar

from pydantic import AliasChoices, BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

T = TypeVar("T")


class Pagination(BaseModel):
    """
    Pagination block returned by list endpoints.

    Most endpoints send ``page/limit/total/pages``; the ministries listing
    sends ``currentPage/itemsPerPage/totalItems/totalPages``. Both validate
    to the same fields.
    """

    page: int = Field(
        ...,
        validation_alias=AliasChoices("page", "currentPage"),
        description="Current page (1-indexed)",
    )
    limit: int = Field(
        ...,
        validation_alias=AliasChoices("limit", "itemsPerPage"),
        description="Items per page",
    )
    total: int = Field(
        ...,
        validation_alias=AliasChoices("total", "totalItems"),
        description="Total matching items",
    )
    pages: int = Field(
        ...,
        validation_alias=AliasChoices("pages", "totalPages"),
        description="Total number of pages",
    )


class ApiResponse(BaseModel, Generic[T]):
    """
    Uniform response envelope.

    ``success=False`` means callers must not assume ``data`` is populated.
    ``pagination`` is only present on list endpoints. Unknown top-level
    keys (e.g. the ``id`` returned by upload endpoints) are preserved.
    """

    model_config = ConfigDict(extra="allow")

    success: bool = Field(..., description="Whether the backend accepted the request")
    message: Optional[str] = Field(None, description="Human-readable status message")
    data: Optional[T] = Field(None, description="Endpoint-specific payload")
    errors: Optional[list[Any]] = Field(None, description="Field-level validation errors")
    pagination: Optional[Pagination] = Field(None, description="Present on list endpoints")

    @property
    def ok(self) -> bool:
        """True when the call succeeded and carried a payload."""
        return self.success and self.data is not None


def parse_envelope(payload: Any, data_type: Any = Any) -> ApiResponse:
    """
    Validate a decoded JSON body into ``ApiResponse[data_type]``.

    Raises:
        ValueError: If the payload does not have the envelope shape
    """
    try:
        return ApiResponse[data_type].model_validate(payload)
    except PydanticValidationError as e:
        raise ValueError(f"Response does not match the API envelope: {e}") from e
