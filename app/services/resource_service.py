import logging
import mimetypes
from pathlib import Path
from typing import Optional, Protocol, Tuple
from urllib.parse import quote

from app.core.config import settings
from app.core.exceptions import ResourceNotFound
from app.core.metrics import record
from app.core.path_safety import SafeKey
from app.services.upstream import http_get, path_segment, raise_for_upstream_status

logger = logging.getLogger(__name__)

DEFAULT_CONTENT_TYPE = "application/octet-stream"

class ResourceStore(Protocol):
    def fetch_resource(self, service_name: str, version: str, key: SafeKey) -> Tuple[bytes, str]:
        ...


class HttpResourceStore:
    """Streams documentation resources from the api-documentation service."""

    api = "api-documentation-resources"

    def __init__(self, base_url: Optional[str] = None, timeout: Optional[float] = None):
        self.base_url = (base_url or settings.API_DOCUMENTATION_URL).rstrip("/")
        self.timeout = timeout if timeout is not None else settings.REQUEST_TIMEOUT_SECONDS

    @record("api-documentation-resources")
    def fetch_resource(self, service_name: str, version: str, key: SafeKey) -> Tuple[bytes, str]:
        try:
            url = (
                f"{self.base_url}/apis/{path_segment(service_name)}/{path_segment(version)}"
                f"/documentation/{quote(key, safe='/')}"
            )
        except ValueError:
            raise ResourceNotFound(service_name, version, key)
        response = http_get(self.api, url, self.timeout)
        if response.status_code == 404:
            raise ResourceNotFound(service_name, version, key)
        raise_for_upstream_status(self.api, response)
        content_type = response.headers.get("Content-Type", DEFAULT_CONTENT_TYPE)
        return response.content, content_type


class LocalResourceStore:
    """
    Reads resources from RESOURCE_ROOT/<service>/<version>/<key>.
    The resolved path is checked again against the root before any read.
    """

    def __init__(self, root: Optional[str] = None):
        self.root = Path(root or settings.RESOURCE_ROOT).resolve()

    def _content_type(self, path: Path) -> str:
        guessed, _ = mimetypes.guess_type(path.name)
        return guessed or DEFAULT_CONTENT_TYPE

    @record("local-resources")
    def fetch_resource(self, service_name: str, version: str, key: SafeKey) -> Tuple[bytes, str]:
        file_path = (self.root / service_name / version / key).resolve()
        if not file_path.is_relative_to(self.root):
            logger.warning("Resource path %s escapes %s", file_path, self.root)
            raise ResourceNotFound(service_name, version, key)
        if not file_path.is_file():
            raise ResourceNotFound(service_name, version, key)
        return file_path.read_bytes(), self._content_type(file_path)


def get_resource_store() -> ResourceStore:
    if settings.RESOURCE_STORE == "local":
        return LocalResourceStore()
    return HttpResourceStore()
