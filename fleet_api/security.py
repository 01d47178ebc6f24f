# fleet_api/security.py
import logging
from datetime import datetime, timedelta, timezone
from typing import Any, Dict, Iterable, Optional

from fastapi import Request, Response
from jose import jwt
from jose.exceptions import JWTError
from starlette.middleware.base import BaseHTTPMiddleware

from fleet_api.config import Settings
from fleet_api.errors import AuthInvalid, AuthMissing, error_response
from fleet_api.schemas.auth import AuthResponse

logger = logging.getLogger(__name__)

def create_access_token(
    magic_code: str,
    secret: str,
    algorithm: str = "HS256",
    expires_hours: int = 24,
    now: Optional[datetime] = None,
) -> str:
    """Sign a token carrying the accepted code, valid for ``expires_hours``."""
    issued_at = now or datetime.now(timezone.utc)
    claims = {
        "auth": magic_code,
        "iat": issued_at,
        "exp": issued_at + timedelta(hours=expires_hours),
    }
    return jwt.encode(claims, secret, algorithm=algorithm)

def verify_token(token: str, secret: str, algorithm: str = "HS256") -> Dict[str, Any]:
    """Check signature and expiry. Raises JWTError when either fails."""
    return jwt.decode(token, secret, algorithms=[algorithm])

def authenticate(magic_code: Any, settings: Settings) -> AuthResponse:
    """Exchange the shared magic code for a bearer token.

    A wrong code is reported in the body only, never through the status.
    """
    if magic_code is not None and magic_code == settings.JWT_MAGIC_CODE:
        token = create_access_token(
            magic_code,
            settings.JWT_SECRET,
            algorithm=settings.JWT_ALGORITHM,
            expires_hours=settings.JWT_EXPIRE_HOURS,
        )
        logger.info("Issued access token")
        return AuthResponse(success=True, message="Authentication successful.", token=token)

    logger.info("Rejected authentication attempt")
    return AuthResponse(success=False, message="Authentication failed. User not found.")

def extract_bearer_token(request: Request) -> Optional[str]:
    scheme, _, token = request.headers.get("Authorization", "").partition(" ")
    token = token.strip()
    if scheme.lower() != "bearer" or not token:
        return None
    return token

class TokenVerifierMiddleware(BaseHTTPMiddleware):
    """
    Gate every request below ``prefix`` on a valid bearer token.

    A missing token is answered with 403 straight away. An invalid token is
    answered with the failure body; unless ``strict`` is set the route still
    runs first and its response is dropped, which is how existing clients
    have always seen this API behave.
    """

    def __init__(
        self,
        app,
        secret: str,
        algorithm: str = "HS256",
        prefix: str = "/api",
        exempt_paths: Iterable[str] = (),
        strict: bool = False,
    ):
        super().__init__(app)
        self.secret = secret
        self.algorithm = algorithm
        self.prefix = prefix.rstrip("/")
        self.exempt_paths = {path.rstrip("/") for path in exempt_paths}
        self.strict = strict

    def is_protected(self, path: str) -> bool:
        path = path.rstrip("/")
        if path in self.exempt_paths:
            return False
        return path == self.prefix or path.startswith(self.prefix + "/")

    async def dispatch(self, request: Request, call_next) -> Response:
        if not self.is_protected(request.url.path):
            return await call_next(request)

        token = extract_bearer_token(request)
        if token is None:
            return error_response(AuthMissing())

        try:
            verify_token(token, self.secret, self.algorithm)
        except JWTError as e:
            failure = AuthInvalid(str(e), strict=self.strict)
            logger.warning(
                "Token rejected for %s %s: %s", request.method, request.url.path, e
            )
            if not self.strict:
                response = await call_next(request)
                async for _ in response.body_iterator:
                    pass
            return error_response(failure)

        return await call_next(request)
