import logging
from typing import List, Optional

from app.core.config import settings
from app.core.metrics import record
from app.schemas.api_schemas import APIDefinition, ExtendedAPIDefinition
from app.services.upstream import http_get, path_segment, raise_for_upstream_status

logger = logging.getLogger(__name__)

API_NAME = "api-documentation"

class APIDocumentationConnector:
    """Reads API definitions from the api-documentation catalog service."""

    api = API_NAME

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.API_DOCUMENTATION_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS

    @staticmethod
    def _email_params(email: Optional[str]) -> Optional[dict]:
        return {"email": email} if email else None

    @record(API_NAME)
    def fetch_extended_definition(self, service_name: str, email: Optional[str] = None) -> Optional[ExtendedAPIDefinition]:
        """
        Fetches one API with its full version list. When an email is given the
        catalog fills in loggedIn/authorised for that developer.
        Returns None when the catalog does not know the service.
        """
        try:
            url = f"{self.base_url}/apis/{path_segment(service_name)}/definition"
        except ValueError:
            logger.info("Unusable service name %r", service_name)
            return None
        response = http_get(self.api, url, self.timeout, params=self._email_params(email))
        if response.status_code == 404:
            logger.info("No API definition for service %s", service_name)
            return None
        raise_for_upstream_status(self.api, response)
        return ExtendedAPIDefinition.model_validate(response.json())

    @record(API_NAME)
    def fetch_all(self, email: Optional[str] = None) -> List[APIDefinition]:
        url = f"{self.base_url}/apis/definition"
        response = http_get(self.api, url, self.timeout, params=self._email_params(email))
        raise_for_upstream_status(self.api, response)
        definitions = [APIDefinition.model_validate(item) for item in response.json()]
        return sorted(definitions, key=lambda d: d.name)

    def fetch_by_email(self, email: str) -> List[APIDefinition]:
        return self.fetch_all(email=email)
