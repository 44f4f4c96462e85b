from datetime import timedelta
from fastapi import APIRouter, HTTPException, status

from timelog.core.settings import settings
from timelog.auth import (
    AuthFormDep,
    CurrentUserDep,
    DBDep,
    authenticate_user,
    create_access_token,
    create_user,
    get_user_by_email,
)
from timelog import schemas

router = APIRouter()

@router.post("/register", response_model=schemas.User, status_code=status.HTTP_201_CREATED)
async def register(user_in: schemas.UserCreate, db: DBDep):
    """Create a new account"""
    existing_user = await get_user_by_email(db, user_in.email)
    if existing_user:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="User already exists"
        )
    user = await create_user(db, user_in)
    return schemas.User.model_validate(user)

@router.post("/token", response_model=schemas.Token)
async def login(form_data: AuthFormDep, db: DBDep):
    """Login with email and password and get an access token"""
    user = await authenticate_user(db, form_data.username, form_data.password)
    if not user:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Incorrect email or password",
            headers={"WWW-Authenticate": "Bearer"},
        )

    access_token_expires = timedelta(minutes=settings.ACCESS_TOKEN_EXPIRE_MINUTES)
    access_token = create_access_token(
        data={"sub": user.email}, expires_delta=access_token_expires
    )

    return {
        "access_token": access_token,
        "token_type": "bearer"
    }

@router.get("/me", response_model=schemas.User)
async def read_current_user(current_user: CurrentUserDep):
    """Get current user info"""
    return current_user
