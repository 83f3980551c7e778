from fastapi import APIRouter
from fastapi.responses import FileResponse

from storefront.config import PAGES_DIR
from storefront.utils.urls import STOREFRONT_URLS

router = APIRouter(tags=["Pages"])

SUCCESS_PAGE = PAGES_DIR / "success.html"
CANCEL_PAGE = PAGES_DIR / "cancel.html"


@router.get(STOREFRONT_URLS.success, include_in_schema=False)
async def success_page():
    """Landing page Stripe redirects to after a completed payment."""
    return FileResponse(SUCCESS_PAGE, media_type="text/html")


@router.get(STOREFRONT_URLS.cancel, include_in_schema=False)
async def cancel_page():
    """Landing page Stripe redirects to when the buyer abandons checkout."""
    return FileResponse(CANCEL_PAGE, media_type="text/html")
