from pydantic import BaseModel, ConfigDict


class ErrorDetail(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "field": "method",
                "message": "Only POST is allowed on this path",
            }
        }
    )

    field: str
    message: str


class ErrorCode(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "code": "NOT_FOUND",
                "message": "Not Found",
                "details": None,
            }
        }
    )

    code: str
    message: str
    details: list[ErrorDetail] | None = None


class ErrorResponse(BaseModel):
    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "error": {
                    "code": "NOT_FOUND",
                    "message": "Not Found",
                    "details": None,
                }
            }
        }
    )

    error: ErrorCode
