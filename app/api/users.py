from datetime import datetime

from fastapi import APIRouter, Depends, HTTPException, status
from pydantic import BaseModel, EmailStr, Field
from sqlalchemy.orm import Session

from app.db.models import User
from app.db.session import get_db

router = APIRouter(prefix="/users", tags=["users"])


class UserCreateRequest(BaseModel):
    name: str = Field(min_length=1, max_length=255)
    email: EmailStr


class UserItem(BaseModel):
    id: int
    name: str
    email: str
    created_at: datetime
    updated_at: datetime


class UserListResponse(BaseModel):
    items: list[UserItem]


def _to_item(row: User) -> UserItem:
    return UserItem(
        id=row.id,
        name=row.name,
        email=row.email,
        created_at=row.created_at,
        updated_at=row.updated_at,
    )


def get_user_or_404(db: Session, user_id: int) -> User:
    user = db.get(User, user_id)
    if not user:
        raise HTTPException(status_code=404, detail=f"User with id {user_id} not found")
    return user


@router.post("", response_model=UserItem, status_code=status.HTTP_201_CREATED)
def create_user(payload: UserCreateRequest, db: Session = Depends(get_db)) -> UserItem:
    email = payload.email.lower()
    existing = db.query(User).filter(User.email == email).first()
    if existing:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail="Email already registered")
    user = User(name=payload.name.strip(), email=email)
    db.add(user)
    db.commit()
    db.refresh(user)
    return _to_item(user)


@router.get("", response_model=UserListResponse)
def list_users(db: Session = Depends(get_db)) -> UserListResponse:
    rows = db.query(User).order_by(User.id.asc()).all()
    return UserListResponse(items=[_to_item(row) for row in rows])


@router.get("/{user_id}", response_model=UserItem)
def get_user(user_id: int, db: Session = Depends(get_db)) -> UserItem:
    return _to_item(get_user_or_404(db, user_id))
