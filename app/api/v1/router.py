from fastapi import APIRouter
from api.v1.routes.dictionaries import router as dictionaries_router


router = APIRouter()
router.include_router(dictionaries_router)
