from fastapi import APIRouter

from webloom.api import routes

router = APIRouter()
router.include_router(routes.router)
