from sqlalchemy import Column, Integer, String, DateTime
from sqlalchemy.sql import func
from .database import Base

class ActivityLog(Base):
    __tablename__ = "activity_logs"

    id = Column(Integer, primary_key=True, index=True)
    timestamp = Column(DateTime(timezone=True), server_default=func.now())
    username = Column(String, index=True, nullable=False)   # developer email or "anonymous"
    user_agent = Column(String, nullable=True)
    action = Column(String, nullable=False)       # e.g., "DOWNLOAD_ATTEMPT"
    resource_id = Column(String, nullable=True)   # e.g., "calendar/1.0/spec.json"
    ip_address = Column(String, nullable=True)
    status = Column(String, nullable=False)       # "SERVED", "REDIRECT_TO_LOGIN", "REJECTED", "UPSTREAM_ERROR"
    details = Column(String, nullable=True)       # e.g., "NotFound"
