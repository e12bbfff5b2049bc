"""Error body returned by every failing endpoint."""

from pydantic import BaseModel, ConfigDict, Field


class ErrorResponseSchema(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "examples": [
                {
                    "error": "BUDGET_NOT_FOUND",
                    "message": "Budget not found: 3f2a9c1e",
                    "request_id": "5b1c0a7e9d2f4c38",
                },
                {
                    "error": "RECORD_STORE_ERROR",
                    "message": "Storage is unavailable. Please try again later.",
                    "request_id": None,
                },
            ]
        }
    )

    error: str = Field(..., description="Stable error code, e.g. WALLET_NOT_FOUND")
    message: str = Field(..., description="What went wrong, for humans")
    request_id: str | None = Field(
        None,
        description="Value of the X-Request-ID response header, for log lookup",
    )
