# ============================================================================
# Common Response Schemas
# ============================================================================
from pydantic import BaseModel
from typing import Optional, Any


class ApiResponse(BaseModel):
    success: bool = True
    data: Any = None
    message: Optional[str] = None


class ErrorResponse(BaseModel):
    success: bool = False
    message: str
    error: Optional[str] = None


class HealthCheckResponse(BaseModel):
    status: str
    app: str
