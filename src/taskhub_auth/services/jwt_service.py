"""JWT token service.

Provides bearer token issuance and verification for authentication.
"""

from datetime import datetime, timedelta, timezone
from uuid import UUID

import jwt

from taskhub_auth.exceptions import InvalidTokenError
from taskhub_auth.schemas import IssuedToken, TokenPayload

FULL_NAME_CLAIM = "FullName"


class JWTService:
    """Service for JWT token creation and verification.

    Tokens carry the user's id (``sub``), email and full name, and are
    signed with a symmetric key (HS256).

    Examples
    --------
    >>> service = JWTService(secret_key="your-secret-key")
    >>> issued = service.issue_token(user_id, "user@example.com", "Jane Doe")
    >>> payload = service.verify_token(issued.token)
    >>> print(payload.user_id)
    """

    DEFAULT_EXPIRE_MINUTES = 60
    ALGORITHM = "HS256"

    def __init__(
        self,
        secret_key: str,
        expire_minutes: int = DEFAULT_EXPIRE_MINUTES,
        issuer: str | None = None,
        audience: str | None = None,
    ):
        """Initialize the JWT service.

        Parameters
        ----------
        secret_key
            Secret key for signing tokens. Must be kept secure.
        expire_minutes
            Minutes until an issued token expires
        issuer
            Value of the ``iss`` claim, verified on decode when set
        audience
            Value of the ``aud`` claim, verified on decode when set
        """
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._expire = timedelta(minutes=expire_minutes)
        self._issuer = issuer
        self._audience = audience

    @property
    def expire_delta(self) -> timedelta:
        return self._expire

    def issue_token(
        self,
        user_id: UUID,
        email: str,
        full_name: str,
        now: datetime | None = None,
    ) -> IssuedToken:
        """Create a signed token for the given identity.

        The expiration is computed from the issue time truncated to whole
        seconds, so it equals the ``exp`` claim exactly.

        Parameters
        ----------
        user_id
            The user's unique identifier
        email
            The user's email address
        full_name
            The user's full name
        now
            Issue time override (defaults to the current UTC time)

        Returns
        -------
        The encoded token together with its expiration
        """
        issued_at = (now or datetime.now(tz=timezone.utc)).replace(microsecond=0)
        expire = issued_at + self._expire

        payload: dict[str, object] = {
            "sub": str(user_id),
            "email": email,
            FULL_NAME_CLAIM: full_name,
            "exp": int(expire.timestamp()),
        }
        if self._issuer:
            payload["iss"] = self._issuer
        if self._audience:
            payload["aud"] = self._audience

        token = jwt.encode(payload, self._secret_key, algorithm=self.ALGORITHM)
        return IssuedToken(token=token, expiration=expire)

    def verify_token(self, token: str) -> TokenPayload:
        """Verify and decode a JWT token.

        Parameters
        ----------
        token
            The JWT token string to verify

        Returns
        -------
        TokenPayload containing the decoded data

        Raises
        ------
        InvalidTokenError
            If token is invalid, expired, or malformed
        """
        try:
            payload = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                issuer=self._issuer,
                audience=self._audience,
                options={"require": ["exp", "sub"]},
            )

            return TokenPayload(
                user_id=UUID(payload["sub"]),
                email=payload["email"],
                full_name=payload.get(FULL_NAME_CLAIM, ""),
                exp=datetime.fromtimestamp(payload["exp"], tz=timezone.utc),
            )

        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e
        except (KeyError, ValueError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
