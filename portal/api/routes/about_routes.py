"""
About Us Routes

GET /about-us - Current About Us content (default on first read)
POST /about-us - Replace the content
"""

from fastapi import APIRouter, Depends

from portal.api.deps import get_storage
from portal.schemas.schemas import AboutUs, AboutUsUpdate, ErrorResponse
from portal.storage.base import StorageBackend

router = APIRouter(prefix="/about-us", tags=["About Us"])


@router.get("", response_model=AboutUs)
async def get_about_us(storage: StorageBackend = Depends(get_storage)):
    return storage.get_about_us()


@router.post(
    "",
    response_model=AboutUs,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def update_about_us(data: AboutUsUpdate, storage: StorageBackend = Depends(get_storage)):
    """Update About Us content. content must be a non-empty string."""
    return storage.update_about_us(data.content)
