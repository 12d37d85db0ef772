"""
Application Routes

GET /applications - List applications (newest first, no resume payload)
GET /applications/{id} - Get one application, resume fields included
GET /applications/{id}/resume - Download the resume file
POST /applications - Submit an application

Ids use the int path convertor: "/applications/abc" matches nothing and
falls through to the 404 fallback.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, Response

from portal.api.deps import get_storage
from portal.schemas.schemas import Application, ApplicationCreate, ApplicationSummary, ErrorResponse
from portal.storage.base import StorageBackend
from portal.utils.resume_codec import build_resume_frame, normalize_upload

router = APIRouter(prefix="/applications", tags=["Applications"])


@router.get("", response_model=List[ApplicationSummary])
async def list_applications(storage: StorageBackend = Depends(get_storage)):
    """List all applications. Resume content is left out; see hasResume."""
    return storage.list_applications()


@router.get(
    "/{application_id:int}",
    response_model=Application,
    responses={404: {"model": ErrorResponse}}
)
async def get_application(application_id: int, storage: StorageBackend = Depends(get_storage)):
    application = storage.get_application(application_id)
    if application is None:
        raise HTTPException(status_code=404, detail="Application not found")
    return application


@router.get(
    "/{application_id:int}/resume",
    response_class=Response,
    responses={200: {"content": {"application/octet-stream": {}}}, 404: {"model": ErrorResponse}}
)
async def get_application_resume(application_id: int, storage: StorageBackend = Depends(get_storage)):
    """Download the resume as an attachment with its original MIME type."""
    frame = build_resume_frame(storage.get_application_resume(application_id))
    if frame is None:
        raise HTTPException(status_code=404, detail="Resume not found")

    return Response(content=frame.body, headers=frame.headers)


@router.post(
    "",
    response_model=Application,
    status_code=201,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}}
)
async def create_application(data: ApplicationCreate, storage: StorageBackend = Depends(get_storage)):
    """Submit an application. name and department are required."""
    if data.resume_file_content is not None:
        content, mime_type = normalize_upload(data.resume_file_content, data.resume_file_type)
        data = data.model_copy(update={"resume_file_content": content, "resume_file_type": mime_type})

    return storage.create_application(data)
