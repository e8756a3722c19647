"""
Public marketing site content.
"""
import logging

from fastapi import APIRouter

from domain.responses import success_response
from services import site_content

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/site", tags=["site"])


@router.get("/home")
async def get_home():
    """Hero, feature highlights, pricing plans and call to action."""
    return success_response(data=site_content.get_home_content())


@router.get("/plans")
async def get_plans():
    return success_response(data=site_content.get_pricing_plans())
