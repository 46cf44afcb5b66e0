from fastapi import APIRouter
from splito.services.system_services import system_health, system_info

router = APIRouter()

@router.get("/health")
async def health():
    return await system_health()

@router.get("/info")
async def info():
    return await system_info()
