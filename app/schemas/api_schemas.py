from pydantic import BaseModel, Field
from enum import Enum
from typing import Any, List, Optional

class AccessType(str, Enum):
    PUBLIC = "PUBLIC"
    PRIVATE = "PRIVATE"

class APIAccess(BaseModel):
    type: AccessType

    class Config:
        frozen = True

class VersionAvailability(BaseModel):
    endpoints_enabled: bool = Field(alias="endpointsEnabled")
    access: APIAccess
    logged_in: bool = Field(alias="loggedIn")
    authorised: bool

    class Config:
        populate_by_name = True
        frozen = True

class VersionVisibility(BaseModel):
    privacy: AccessType
    logged_in: bool
    authorised: bool

    class Config:
        frozen = True

class VersionDefinition(BaseModel):
    version: str
    status: str
    endpoints: List[Any] = []
    production_availability: Optional[VersionAvailability] = Field(default=None, alias="productionAvailability")
    sandbox_availability: Optional[VersionAvailability] = Field(default=None, alias="sandboxAvailability")

    class Config:
        populate_by_name = True

class APIDefinition(BaseModel):
    service_name: str = Field(alias="serviceName")
    name: str
    description: str = ""
    context: str = ""
    versions: List[VersionDefinition] = []

    class Config:
        populate_by_name = True

class ExtendedAPIDefinition(APIDefinition):
    requires_trust: bool = Field(default=False, alias="requiresTrust")
    is_test_support: bool = Field(default=False, alias="isTestSupport")

    def find_version(self, version: str) -> Optional[VersionDefinition]:
        return next((v for v in self.versions if v.version == version), None)
