from datetime import datetime, timedelta, timezone
from typing import Optional

from fastapi import APIRouter, Header
from jose import ExpiredSignatureError, JWTError, jwt
from passlib.context import CryptContext

import config
from exceptions import AuthenticationError, InvalidCredentialsError, InvalidTokenError, TokenExpiredError
from logging_config import get_logger
from schemas import AdminIdentity, LoginRequest, LoginResponse

logger = get_logger("auth")

# Use pbkdf2_sha256 to avoid external bcrypt dependency issues
pwd_context = CryptContext(schemes=["pbkdf2_sha256"], deprecated="auto")

ADMIN_PASSWORD_HASH = config.ADMIN_PASSWORD_HASH or pwd_context.hash(config.ADMIN_PASSWORD)

router = APIRouter(prefix="/api/auth", tags=["auth"])


def verify_password(plain_password: str, hashed_password: str) -> bool:
    return pwd_context.verify(plain_password, hashed_password)


def create_access_token(data: dict, expires_delta: Optional[timedelta] = None) -> str:
    to_encode = data.copy()
    now = datetime.now(timezone.utc)
    expire = now + (expires_delta or timedelta(minutes=config.ACCESS_TOKEN_EXPIRE_MINUTES))
    to_encode.update({"iat": now, "exp": expire})
    return jwt.encode(to_encode, config.JWT_SECRET, algorithm=config.JWT_ALGORITHM)


def decode_token(token: str) -> dict:
    """Check signature and expiry; the payload must name the admin role."""
    try:
        payload = jwt.decode(token, config.JWT_SECRET, algorithms=[config.JWT_ALGORITHM])
    except ExpiredSignatureError:
        raise TokenExpiredError()
    except JWTError:
        raise InvalidTokenError()
    if payload.get("role") != "admin" or not payload.get("email"):
        raise InvalidTokenError()
    return payload


def authenticate(email: str, password: str) -> str:
    """Issue a token for the configured admin, or raise InvalidCredentialsError."""
    if email != config.ADMIN_EMAIL or not verify_password(password, ADMIN_PASSWORD_HASH):
        logger.log_auth_event("login", success=False, user_email=email, reason="invalid credentials")
        raise InvalidCredentialsError()
    logger.log_auth_event("login", success=True, user_email=email)
    return create_access_token({"sub": email, "email": email, "role": "admin"})


def bearer_token(authorization: Optional[str]) -> str:
    if not authorization or not authorization.lower().startswith("bearer "):
        raise AuthenticationError("No token provided", code="NO_TOKEN")
    token = authorization.split(" ", 1)[1].strip()
    if not token:
        raise AuthenticationError("No token provided", code="NO_TOKEN")
    return token


def get_current_admin(authorization: Optional[str] = Header(None)) -> dict:
    """Dependency guarding every mutating route."""
    try:
        payload = decode_token(bearer_token(authorization))
    except AuthenticationError as exc:
        logger.log_auth_event("token", success=False, reason=exc.code)
        raise
    return {"email": payload["email"], "role": payload["role"]}


@router.post("/login", response_model=LoginResponse)
def login(data: LoginRequest):
    token = authenticate(data.email, data.password)
    return LoginResponse(token=token, user=AdminIdentity(email=data.email))


@router.get("/verify")
def verify(authorization: Optional[str] = Header(None)):
    payload = decode_token(bearer_token(authorization))
    return {
        "success": True,
        "user": {"email": payload["email"], "role": payload["role"], "exp": payload.get("exp")},
    }
