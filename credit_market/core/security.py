from passlib.context import CryptContext

from credit_market.settings import settings

pwd_context = CryptContext(schemes=[settings.PASSWORD_HASH_SCHEME], deprecated="auto")


def verify_password(plain_password: str, hashed_password: str | None) -> bool:
    """Verify that the provided password matches the hashed password."""
    if not hashed_password:
        return False
    return pwd_context.verify(plain_password, hashed_password)


def get_password_hash(password: str) -> str:
    """Hash the provided password."""
    return pwd_context.hash(password)
