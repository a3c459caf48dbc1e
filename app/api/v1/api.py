from fastapi import APIRouter
from .endpoints import balance

api_router = APIRouter()
api_router.include_router(balance.router, prefix="/stripe", tags=["stripe"])
