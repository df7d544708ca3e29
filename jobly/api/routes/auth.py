from fastapi import APIRouter, Depends, status
from fastapi.security import OAuth2PasswordRequestForm
from sqlalchemy.orm import Session

from jobly.core.auth_dependency import get_db
from jobly.core.security import create_access_token
from jobly.schemas.auth import TokenRequest, RegisterRequest, TokenResponse
from jobly.services import user_service

router = APIRouter(prefix="/auth", tags=["Auth"])


# ✅ LOGIN: username + password -> JWT
@router.post("/token", response_model=TokenResponse)
def get_token(credentials: TokenRequest, db: Session = Depends(get_db)):
    user = user_service.authenticate(db, credentials.username, credentials.password)
    token = create_access_token(user["username"], bool(user["is_admin"]))
    return {"token": token}


# ✅ OAUTH2 FORM LOGIN (Swagger "Authorize" button)
@router.post("/login")
def login(
    form_data: OAuth2PasswordRequestForm = Depends(),
    db: Session = Depends(get_db),
):
    user = user_service.authenticate(db, form_data.username, form_data.password)
    token = create_access_token(user["username"], bool(user["is_admin"]))
    return {
        "access_token": token,
        "token_type": "bearer",
    }


# ✅ SELF-REGISTRATION (never admin)
@router.post("/register", status_code=status.HTTP_201_CREATED, response_model=TokenResponse)
def register(user_data: RegisterRequest, db: Session = Depends(get_db)):
    user = user_service.register(db, {**user_data.model_dump(by_alias=True), "isAdmin": False})
    token = create_access_token(user["username"], False)
    return {"token": token}
