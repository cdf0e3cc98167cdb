from fastapi import Request

from apps.user.services import create_user, list_users, get_user
from apps.user.validators import validate_user
from utils.validation import parse_record_id, read_json_object


async def add_user(request: Request):
    candidate = await read_json_object(request)
    data = validate_user(candidate).unwrap()
    return await create_user(data)


async def all_users(request: Request):
    return await list_users()


async def retrieve_user(request: Request, user_id: str):
    return await get_user(parse_record_id(user_id))
