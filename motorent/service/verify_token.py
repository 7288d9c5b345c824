"""
Verify Token
------------

A number of API token verification strategies.

Tokens are issued elsewhere; the server only checks them and
extracts the subject, which identifies the caller.
"""
from abc import ABC, abstractmethod

from aiohttp.web_request import Request
from jose import jwt, ExpiredSignatureError, JWTError


class TokenVerificationError(Exception):

    def __init__(self, message):
        super().__init__(message)
        self.message = message


class TokenVerifier(ABC):

    @abstractmethod
    def verify_token(self, token):
        """
        Given a token, verifies it, returning the token subject or a token verification error.

        :raises TokenVerificationError: When the provided token is invalid.
        """


class JWTVerifier(TokenVerifier):
    """
    Verifies a HS256 signed JWT, returning its subject.
    """

    def __init__(self, secret: str, audience: str = None):
        if not secret:
            raise ValueError("A secret is required to verify tokens.")
        self._secret = secret
        self.audience = audience

    def verify_token(self, token, verify_exp=True):
        if not isinstance(token, str):
            raise TypeError(f"Token must be of type string, not {type(token)}")

        try:
            claims = jwt.decode(
                token,
                self._secret,
                algorithms=['HS256'],
                audience=self.audience,
                options={'verify_exp': verify_exp, 'verify_aud': self.audience is not None}
            )
        except ExpiredSignatureError as e:
            raise TokenVerificationError("Token is expired.") from e
        except JWTError as e:
            raise TokenVerificationError("Token is invalid.") from e

        subject = claims.get("sub")
        if not subject:
            raise TokenVerificationError("Token has no subject.")

        return subject


class DummyVerifier(TokenVerifier):
    """
    Verifies a dummy token. Any hex string is its own subject.
    """

    def verify_token(self, token: str) -> str:
        try:
            bytes.fromhex(token)
        except (ValueError, TypeError):
            raise TokenVerificationError("Invalid")

        if not token:
            raise TokenVerificationError("Invalid")

        return token


def verify_token(request: Request):
    """
    Checks a view for the existence of a valid Authorization header.

    :param request: The view to check.
    :return: The valid token.
    :raises TokenVerificationError: When the Authorize header is invalid.
    """
    if "Authorization" not in request.headers:
        raise TokenVerificationError("You must supply your bearer token (Authorization header was not included).")

    if not request.headers["Authorization"].startswith("Bearer "):
        raise TokenVerificationError("The Authorization header must be of the format \"Bearer $TOKEN\".")

    return request.app["token_verifier"].verify_token(request.headers["Authorization"][7:])
