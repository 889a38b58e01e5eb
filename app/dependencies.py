from typing import Optional

from fastapi import Depends, Header
from sqlalchemy.orm import Session

from app.database import get_db
from app.models.application import Application
from app.services.application_service import ApplicationService, CLIENT_KEY, SERVER_KEY


def get_server_application(
    app_name: Optional[str] = Header(None, alias="X-App"),
    app_token: Optional[str] = Header(None, alias="X-App-Token"),
    db: Session = Depends(get_db),
) -> Application:
    return ApplicationService.authenticate(db, app_name, app_token, SERVER_KEY)


def get_client_application(
    app_name: Optional[str] = Header(None, alias="X-Client-Application"),
    app_token: Optional[str] = Header(None, alias="X-Client-Token"),
    db: Session = Depends(get_db),
) -> Application:
    return ApplicationService.authenticate(db, app_name, app_token, CLIENT_KEY)
