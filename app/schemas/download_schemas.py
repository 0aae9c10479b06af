from pydantic import BaseModel, Field
from enum import Enum
from typing import Annotated, Literal, Optional, Union

class RejectionReason(str, Enum):
    PATH_TRAVERSAL_ATTEMPT = "PathTraversalAttempt"
    NOT_FOUND = "NotFound"
    FORBIDDEN = "Forbidden"

class DownloadRequest(BaseModel):
    service_name: str
    version: str
    resource_key: str
    session_id: Optional[str] = None
    request_url: str

class Serve(BaseModel):
    kind: Literal["serve"] = "serve"
    content: bytes
    content_type: str
    developer_email: Optional[str] = None

    class Config:
        frozen = True

class RedirectToLogin(BaseModel):
    kind: Literal["redirect_to_login"] = "redirect_to_login"
    return_url: str

    class Config:
        frozen = True

class Rejected(BaseModel):
    kind: Literal["rejected"] = "rejected"
    reason: RejectionReason
    developer_email: Optional[str] = None

    class Config:
        frozen = True

DownloadDecision = Annotated[Union[Serve, RedirectToLogin, Rejected], Field(discriminator="kind")]
