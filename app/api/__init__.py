"""
API main router
"""
from fastapi import APIRouter
from app.api.routes import learning

router = APIRouter()

router.include_router(learning.router)
