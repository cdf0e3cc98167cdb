from utils.validation import Validated, validate_schema
from apps.blog.schema import BlogCreate


def validate_blog(candidate: dict) -> Validated[BlogCreate]:
    # unknown keys such as _id or __v are ignored, the store assigns ids
    return validate_schema(BlogCreate, candidate)
