import bcrypt

from app.config import settings


def hash_password(password: str) -> str:
    # Salt cost comes from settings so tests can run with cheap rounds
    salt = bcrypt.gensalt(settings.BCRYPT_ROUNDS)
    hashed_password = bcrypt.hashpw(password.encode('utf-8'), salt)
    return hashed_password.decode('utf-8')


def verify_password(password: str, hashed_password: str) -> bool:
    # Verify the password against the stored hash
    try:
        return bcrypt.checkpw(password.encode('utf-8'), hashed_password.encode('utf-8'))
    except ValueError:
        # Stored value is not a bcrypt hash
        return False
