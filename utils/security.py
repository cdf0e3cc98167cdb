from passlib.context import CryptContext

from config.settings import PASSWORD_HASH_ROUNDS

pwd_context = CryptContext(schemes=['bcrypt'], deprecated='auto', bcrypt__rounds=PASSWORD_HASH_ROUNDS)


def hash_password(password: str) -> str:
    return pwd_context.hash(password)


def verify_password(password: str, hashed: str) -> bool:
    return pwd_context.verify(password, hashed)
