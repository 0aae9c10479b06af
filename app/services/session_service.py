import logging
from typing import Optional

from app.core.config import settings
from app.core.exceptions import SessionInvalid
from app.core.metrics import record
from app.schemas.session_schemas import Session
from app.services.upstream import http_get, path_segment, raise_for_upstream_status

logger = logging.getLogger(__name__)

API_NAME = "third-party-developer"

class UserSessionConnector:
    """Looks developer sessions up in the third-party-developer service."""

    api = API_NAME

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.THIRD_PARTY_DEVELOPER_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS

    @record(API_NAME)
    def fetch_session(self, session_id: str) -> Session:
        try:
            url = f"{self.base_url}/session/{path_segment(session_id)}"
        except ValueError:
            raise SessionInvalid(session_id)
        response = http_get(self.api, url, self.timeout)
        if response.status_code == 404:
            raise SessionInvalid(session_id)
        raise_for_upstream_status(self.api, response)
        return Session.model_validate(response.json())


class SessionValidator:
    """
    Turns a presented session id into a Session.

    A missing, empty or unknown id raises SessionInvalid. Any other failure of
    the identity service (TransportError) propagates untouched so that an
    outage never reads as "please log in". No retries happen here.
    """

    def __init__(self, connector: Optional[UserSessionConnector] = None):
        self.connector = connector or UserSessionConnector()

    def validate(self, session_id: Optional[str]) -> Session:
        if not session_id:
            raise SessionInvalid("no session presented")
        session = self.connector.fetch_session(session_id)
        logger.debug("Session validated for %s", session.developer.email)
        return session
