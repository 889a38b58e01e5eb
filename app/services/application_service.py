
import hmac
import logging
import secrets
from typing import Iterable, Optional

from sqlalchemy.orm import Session

from app.errors import AuthenticationError
from app.models.application import Application

logger = logging.getLogger(__name__)

SERVER_KEY = "server"
CLIENT_KEY = "client"


def _key_matches(candidate: str, keys: Iterable[str]) -> bool:
    matched = False
    # check every key so timing does not reveal which one matched
    for key in keys or []:
        if hmac.compare_digest(str(key).encode("utf-8"), candidate.encode("utf-8")):
            matched = True
    return matched


class ApplicationService:
    """Tenant lookup and credential checks"""

    @staticmethod
    def get_by_name(db: Session, name: str) -> Optional[Application]:
        return db.query(Application).filter(Application.name == name).first()

    @staticmethod
    def create_application(db: Session, name: str) -> Application:
        application = Application(
            name=name,
            server_secret_key=[secrets.token_urlsafe(32)],
            client_secret_key=[secrets.token_urlsafe(32)],
        )
        db.add(application)
        db.commit()
        db.refresh(application)
        logger.info("application created", extra={"application": name})
        return application

    @staticmethod
    def authenticate(db: Session, name: Optional[str], token: Optional[str], kind: str) -> Application:
        """Resolve the tenant for ``name`` if ``token`` is one of its ``kind`` keys."""
        if not name or not token:
            logger.warning("missing application credentials", extra={"key_kind": kind})
            raise AuthenticationError()

        application = ApplicationService.get_by_name(db, name)
        if application is None:
            logger.warning("unknown application", extra={"application": name, "key_kind": kind})
            raise AuthenticationError()

        keys = application.server_secret_key if kind == SERVER_KEY else application.client_secret_key
        if not _key_matches(token, keys):
            logger.warning("invalid application key", extra={"application": name, "key_kind": kind})
            raise AuthenticationError()
        return application
