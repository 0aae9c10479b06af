from fastapi import APIRouter, Depends, HTTPException, Request, Response
from fastapi.responses import RedirectResponse
from sqlalchemy.orm import Session
from typing import List, Optional
from urllib.parse import urlencode
import logging

from app.api.auth import get_catalog, get_db, get_download_gate, get_optional_session, get_session_id
from app.core.config import settings
from app.core.download_gate import ResourceDownloadGate
from app.core.exceptions import TransportError
from app.schemas.api_schemas import APIDefinition, ExtendedAPIDefinition
from app.schemas.download_schemas import DownloadRequest, RedirectToLogin, RejectionReason, Serve
from app.schemas.session_schemas import Session as DeveloperSession
from app.services import log_service
from app.services.catalog_service import APIDocumentationConnector

logger = logging.getLogger(__name__)

router = APIRouter()

REJECTION_STATUS = {
    RejectionReason.NOT_FOUND: 404,
    RejectionReason.FORBIDDEN: 403,
    RejectionReason.PATH_TRAVERSAL_ATTEMPT: 500,
}

def _email(session: Optional[DeveloperSession]) -> Optional[str]:
    return session.developer.email if session else None


@router.get("/", response_model=List[APIDefinition], response_model_by_alias=True)
def list_apis(
    catalog: APIDocumentationConnector = Depends(get_catalog),
    session: Optional[DeveloperSession] = Depends(get_optional_session),
):
    """
    All APIs in the catalog sorted by name, as seen by the logged in developer if any.
    """
    return catalog.fetch_all(email=_email(session))


@router.get("/{service_name}", response_model=ExtendedAPIDefinition, response_model_by_alias=True)
def get_api(
    service_name: str,
    catalog: APIDocumentationConnector = Depends(get_catalog),
    session: Optional[DeveloperSession] = Depends(get_optional_session),
):
    definition = catalog.fetch_extended_definition(service_name, _email(session))
    if definition is None:
        raise HTTPException(status_code=404, detail="API not found")
    return definition


@router.get("/{service_name}/{version}/documentation/{resource_key:path}")
async def download_resource(
    service_name: str,
    version: str,
    resource_key: str,
    request: Request,
    db: Session = Depends(get_db),
    gate: ResourceDownloadGate = Depends(get_download_gate),
    session_id: Optional[str] = Depends(get_session_id),
):
    """
    Downloads a documentation resource for one API version, subject to the
    version's visibility and the caller's session.
    """
    download = DownloadRequest(
        service_name=service_name,
        version=version,
        resource_key=resource_key,
        session_id=session_id,
        request_url=str(request.url),
    )
    resource_id = f"{service_name}/{version}/{resource_key}"
    audit = dict(
        db=db,
        username="anonymous",
        action="DOWNLOAD_ATTEMPT",
        ip=request.client.host if request.client else "unknown",
        user_agent=request.headers.get("user-agent", "unknown"),
        resource_id=resource_id,
    )

    try:
        decision = await gate.decide(download)
    except TransportError as e:
        log_service.log_activity(status="UPSTREAM_ERROR", details=str(e), **audit)
        raise

    if getattr(decision, "developer_email", None):
        audit["username"] = decision.developer_email

    if isinstance(decision, Serve):
        log_service.log_activity(status="SERVED", **audit)
        return Response(content=decision.content, media_type=decision.content_type)

    if isinstance(decision, RedirectToLogin):
        log_service.log_activity(status="REDIRECT_TO_LOGIN", **audit)
        login_url = f"{settings.LOGIN_URL}?{urlencode({'returnUrl': decision.return_url})}"
        return RedirectResponse(url=login_url, status_code=302)

    log_service.log_activity(status="REJECTED", details=decision.reason.value, **audit)
    if decision.reason == RejectionReason.PATH_TRAVERSAL_ATTEMPT:
        logger.warning("Path traversal attempt on %s from %s", resource_id, audit["ip"])
    raise HTTPException(status_code=REJECTION_STATUS[decision.reason], detail=decision.reason.value)
