"""Password hashing for user registration and login.

We use passlib's pbkdf2_sha256: an adaptive hash whose cost is the round count
(``settings.password_hash_rounds``). Every hash gets a fresh random salt and is
stored as a self-describing ``$pbkdf2-sha256$<rounds>$<salt>$<digest>`` string,
so verification never needs the current cost setting.

A malformed stored hash and a wrong password both surface as
CredentialMismatch; callers cannot tell the two apart.
"""
from passlib.context import CryptContext

from app.core.errors import CredentialMismatch, HashingFailure
from app.core.settings import settings

pwd_context = CryptContext(
    schemes=["pbkdf2_sha256"],
    deprecated="auto",
    pbkdf2_sha256__default_rounds=settings.password_hash_rounds,
)


def hash_password(plain: str) -> str:
    try:
        return pwd_context.hash(plain)
    except (ValueError, TypeError, OSError, NotImplementedError) as exc:
        # passlib raises PasswordSizeError (a ValueError) past its size limit;
        # OSError / NotImplementedError come from an unavailable entropy source.
        raise HashingFailure() from exc


def verify_password(plain: str, hashed: str) -> None:
    try:
        matched = pwd_context.verify(plain, hashed)
    except (ValueError, TypeError) as exc:
        raise CredentialMismatch() from exc
    if not matched:
        raise CredentialMismatch()


def simulate_verify() -> None:
    """Spend a verification's worth of work when there is no stored hash to check."""
    pwd_context.dummy_verify()
