from typing import Optional
from fastapi import APIRouter, Depends, Response
from sqlalchemy.orm import Session

from animelog.db import get_db
from animelog.core.auth import get_optional_user
from animelog.core.exceptions import AnimeNotFoundException
from animelog.core.jikan_service import get_catalog_service
from animelog.core.services.anime_service import AnimeCatalogService
from animelog.models.user import User
from animelog.schemas.anime import (
    ActionResult, AnimeDetailPage, UserAnimeWrite, UserAnimeStatusUpdate
)
from animelog.services.page_service import PageService
from animelog.services.user_anime_service import UserAnimeService
from animelog.routers.common import handle_exception, action_response

router = APIRouter(prefix="/anime", tags=["anime"])

@router.get("/{mal_id}", response_model=AnimeDetailPage)
def get_anime_detail(
    mal_id: str,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db),
    catalog: AnimeCatalogService = Depends(get_catalog_service)
):
    try:
        anime_id = int(mal_id)
    except ValueError:
        raise handle_exception(AnimeNotFoundException(f"Anime {mal_id} not found"))
    try:
        return PageService(db, catalog).get_anime_detail_page(anime_id, current_user)
    except Exception as e:
        raise handle_exception(e)

@router.post("/{mal_id}/favorite", response_model=ActionResult)
def toggle_favorite(
    mal_id: int,
    body: UserAnimeWrite,
    response: Response,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    try:
        result = UserAnimeService(db).toggle_favorite(current_user, mal_id, body.title, body.image_url)
    except Exception as e:
        raise handle_exception(e)
    return action_response(result, response)

@router.put("/{mal_id}/status", response_model=ActionResult)
def set_anime_status(
    mal_id: int,
    body: UserAnimeStatusUpdate,
    response: Response,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    try:
        result = UserAnimeService(db).set_anime_status(
            current_user, mal_id, body.title, body.image_url, body.status
        )
    except Exception as e:
        raise handle_exception(e)
    return action_response(result, response)

@router.delete("/{mal_id}", response_model=ActionResult)
def remove_from_list(
    mal_id: int,
    response: Response,
    current_user: Optional[User] = Depends(get_optional_user),
    db: Session = Depends(get_db)
):
    try:
        result = UserAnimeService(db).remove_from_list(current_user, mal_id)
    except Exception as e:
        raise handle_exception(e)
    return action_response(result, response)
