import logging
from typing import Optional

from starlette.concurrency import run_in_threadpool

from app.core.exceptions import ResourceNotFound, SessionInvalid
from app.core.path_safety import SafeKey, validate_resource_key
from app.core.visibility import resolve_visibility
from app.schemas.api_schemas import AccessType, VersionAvailability
from app.schemas.download_schemas import (
    DownloadDecision, DownloadRequest, RedirectToLogin, Rejected, RejectionReason, Serve,
)
from app.services.catalog_service import APIDocumentationConnector
from app.services.resource_service import ResourceStore
from app.services.session_service import SessionValidator

logger = logging.getLogger(__name__)

class ResourceDownloadGate:
    """
    Decides whether a documentation resource download is served, sent to the
    login page, or rejected.

    Steps, in order, each one ending the request when it fails:
      1. the resource key must be a safe key (no upstream call is made otherwise)
      2. the service and version must exist in the catalog and be enabled
      3. private versions need a valid session whose developer is authorised
      4. the byte store must hold the resource

    TransportError from any collaborator and task cancellation propagate;
    neither is turned into a decision.
    """

    def __init__(
        self,
        catalog: APIDocumentationConnector,
        sessions: SessionValidator,
        store: ResourceStore,
    ):
        self.catalog = catalog
        self.sessions = sessions
        self.store = store

    async def decide(self, request: DownloadRequest) -> DownloadDecision:
        key = validate_resource_key(request.resource_key)
        if isinstance(key, Rejected):
            return key

        availability = await self._availability(request.service_name, request.version)
        if availability is None or not availability.endpoints_enabled:
            logger.info("%s %s not found or disabled", request.service_name, request.version)
            return Rejected(reason=RejectionReason.NOT_FOUND)

        visibility = resolve_visibility(availability)
        if visibility.privacy == AccessType.PUBLIC:
            return await self._serve(request, key)

        try:
            session = await run_in_threadpool(self.sessions.validate, request.session_id)
        except SessionInvalid:
            logger.info("No valid session for private %s %s", request.service_name, request.version)
            return RedirectToLogin(return_url=request.request_url)

        # the anonymous lookup cannot say whether this developer may use the version
        availability = await self._availability(
            request.service_name, request.version, email=session.developer.email
        )
        if availability is None or not availability.endpoints_enabled:
            return Rejected(reason=RejectionReason.NOT_FOUND, developer_email=session.developer.email)

        visibility = resolve_visibility(availability)
        if not visibility.authorised:
            logger.info(
                "%s is not authorised for %s %s",
                session.developer.email, request.service_name, request.version,
            )
            return Rejected(reason=RejectionReason.FORBIDDEN, developer_email=session.developer.email)

        return await self._serve(request, key, developer_email=session.developer.email)

    async def _availability(
        self, service_name: str, version: str, email: Optional[str] = None
    ) -> Optional[VersionAvailability]:
        definition = await run_in_threadpool(self.catalog.fetch_extended_definition, service_name, email)
        if definition is None:
            return None
        version_definition = definition.find_version(version)
        if version_definition is None:
            return None
        return version_definition.production_availability

    async def _serve(
        self, request: DownloadRequest, key: SafeKey, developer_email: Optional[str] = None
    ) -> DownloadDecision:
        try:
            content, content_type = await run_in_threadpool(
                self.store.fetch_resource, request.service_name, request.version, key
            )
        except ResourceNotFound:
            logger.info("Resource %s missing for %s %s", key, request.service_name, request.version)
            return Rejected(reason=RejectionReason.NOT_FOUND, developer_email=developer_email)
        return Serve(content=content, content_type=content_type, developer_email=developer_email)
