# app/routers/users.py
from fastapi import APIRouter, Depends
from app.auth.basic_auth import get_current_user
from app.auth.user_details import UserDetails
from app.schemas.user import CurrentUserOut

router = APIRouter()


@router.get("/users/me", response_model=CurrentUserOut, summary="Who am I")
def get_me(user: UserDetails = Depends(get_current_user)):
    return CurrentUserOut(username=user.username, roles=sorted(user.roles))
