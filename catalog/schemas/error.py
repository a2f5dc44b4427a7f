"""Error response schema returned for application errors."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponse(BaseModel):
    """Structured body sent along with the X-CUSTOM-ERROR header."""

    error_code: int = Field(
        ...,
        alias="errorCode",
        description="Numeric error code",
        examples=[500],
    )

    error_message: str = Field(
        ...,
        alias="errorMessage",
        description="What went wrong",
        examples=["Got some kind of error from somewhere"],
    )

    model_config = ConfigDict(populate_by_name=True)
