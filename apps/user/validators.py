from utils.validation import Validated, validate_schema
from apps.user.schema import UserCreate


def validate_user(candidate: dict) -> Validated[UserCreate]:
    return validate_schema(UserCreate, candidate)
