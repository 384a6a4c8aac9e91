# mainstreet_admin/api/v1/endpoints/auth.py

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.orm import Session
from mainstreet_admin.api import deps
from mainstreet_admin.core.security import create_access_token, hash_password, verify_password
from mainstreet_admin.db.session import get_db
from mainstreet_admin.models.user import User as UserModel
from mainstreet_admin.schemas.user import LoginRequest, Token, User, UserCreate
import logging

router = APIRouter()

@router.post("/login", response_model=Token)
def login(credentials: LoginRequest, db: Session = Depends(get_db)):
    logging.info(f"Login attempt for: {credentials.email}")
    user = db.query(UserModel).filter(UserModel.email == credentials.email).first()

    if not user or not verify_password(credentials.password, user.password):
        logging.warning(f"Authentication failed for: {credentials.email}")
        raise HTTPException(status_code=status.HTTP_401_UNAUTHORIZED, detail="Invalid credentials")

    if not user.is_admin:
        logging.warning(f"User {user.id} does not have admin role")
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="Admin access required")

    access_token = create_access_token(data={"sub": str(user.id), "email": user.email, "role": user.role})
    return Token(token=access_token, user=User.model_validate(user))

@router.post("/register", response_model=User, status_code=status.HTTP_201_CREATED)
def register(
    new_user: UserCreate,
    db: Session = Depends(get_db),
    current_user: UserModel = Depends(deps.get_current_admin),
):
    existing_user = db.query(UserModel).filter(UserModel.email == new_user.email).first()
    if existing_user:
        raise HTTPException(status_code=status.HTTP_400_BAD_REQUEST, detail="User already exists")

    user = UserModel(email=new_user.email, password=hash_password(new_user.password), role=new_user.role)
    db.add(user)
    db.commit()
    db.refresh(user)
    logging.info(f"Admin {current_user.id} registered user {user.id} with role {user.role}")
    return user

@router.get("/me", response_model=User)
def read_users_me(current_user: UserModel = Depends(deps.get_current_admin)):
    return current_user
