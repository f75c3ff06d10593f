# ============================================================================
# Main API Router
# ============================================================================
from fastapi import APIRouter

from app.api.v1 import admin

api_router = APIRouter()

# Dashboard and per-domain analytics
api_router.include_router(admin.router)
