from pydantic import BaseModel, Field

class Developer(BaseModel):
    email: str
    first_name: str = Field(default="", alias="firstName")
    last_name: str = Field(default="", alias="lastName")

    class Config:
        populate_by_name = True

class Session(BaseModel):
    session_id: str = Field(alias="sessionId")
    developer: Developer

    class Config:
        populate_by_name = True
