from typing import Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from animelog.db import get_db
from animelog.core.auth import get_current_user, get_optional_user
from animelog.models.user import User
from animelog.schemas.anime import ActionResult
from animelog.schemas.user import GenrePreferencesUpdate, PreferencesPage
from animelog.services.preference_service import PreferenceService
from animelog.routers.common import handle_exception, action_response

router = APIRouter(prefix="/preferences", tags=["preferences"])

@router.get("", response_model=PreferencesPage)
def get_preferences(current_user: User = Depends(get_current_user), db: Session = Depends(get_db)):
    try:
        return PreferenceService(db).get_preferences_page(current_user.id)
    except Exception as e:
        raise handle_exception(e)

@router.put("", response_model=ActionResult)
def update_preferences(
    body: GenrePreferencesUpdate,
    response: Response,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    try:
        result = PreferenceService(db).update_genre_preferences(current_user, body.genres)
    except Exception as e:
        raise handle_exception(e)
    return action_response(result, response)
