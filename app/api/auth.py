import logging
from typing import Optional

from fastapi import Depends, Request

from app.core.config import settings
from app.core.download_gate import ResourceDownloadGate
from app.core.exceptions import SessionInvalid
from app.db.database import SessionLocal
from app.schemas.session_schemas import Session
from app.services import resource_service
from app.services.catalog_service import APIDocumentationConnector
from app.services.resource_service import ResourceStore
from app.services.session_service import SessionValidator

logger = logging.getLogger(__name__)

# Dependency to get a DB session
def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()

def get_catalog() -> APIDocumentationConnector:
    return APIDocumentationConnector()

def get_session_validator() -> SessionValidator:
    return SessionValidator()

def get_resource_store() -> ResourceStore:
    return resource_service.get_resource_store()

def get_download_gate(
    catalog: APIDocumentationConnector = Depends(get_catalog),
    sessions: SessionValidator = Depends(get_session_validator),
    store: ResourceStore = Depends(get_resource_store),
) -> ResourceDownloadGate:
    return ResourceDownloadGate(catalog=catalog, sessions=sessions, store=store)

def get_session_id(request: Request) -> Optional[str]:
    return request.cookies.get(settings.SESSION_COOKIE_NAME)

def get_optional_session(
    session_id: Optional[str] = Depends(get_session_id),
    validator: SessionValidator = Depends(get_session_validator),
) -> Optional[Session]:
    """
    The developer behind the session cookie, or None for anonymous browsing.
    Identity service outages are not swallowed here.
    """
    try:
        return validator.validate(session_id)
    except SessionInvalid:
        return None
