from typing import Optional


class SessionInvalid(Exception):
    """The presented session id does not map to a live session."""


class TransportError(Exception):
    """
    An upstream service (catalog, identity, resource store) failed to answer.
    Never mapped to a decision; surfaces to the caller as a 5xx.
    """

    def __init__(self, api: str, url: str, status_code: Optional[int] = None, message: str = ""):
        self.api = api
        self.url = url
        self.status_code = status_code
        detail = message or (f"status {status_code}" if status_code else "no response")
        super().__init__(f"{api} request to {url} failed: {detail}")


class ResourceNotFound(Exception):
    """The byte store has nothing under the requested key."""

    def __init__(self, service_name: str, version: str, key: str):
        self.service_name = service_name
        self.version = version
        self.key = key
        super().__init__(f"Resource {key} not found for {service_name} {version}")
