import logging

from sqlalchemy.orm import Session
from app.db import models

logger = logging.getLogger(__name__)

def log_activity(
        db: Session, username: str,
        action: str, status: str, ip: str = None,
        user_agent: str = None, resource_id: str = None,
        details: str = None):

    new_log = models.ActivityLog(
        username=username,
        action=action,
        status=status,
        ip_address=ip,
        user_agent=user_agent,
        resource_id=str(resource_id) if resource_id else None,
        details=details
    )
    db.add(new_log)
    db.commit()
    logger.debug("Activity %s %s for %s on %s", action, status, username, resource_id)
