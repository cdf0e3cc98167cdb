from typing import List, Optional

from starlette.concurrency import run_in_threadpool
from tortoise.exceptions import IntegrityError

from apps.user.models import User
from apps.user.schema import UserCreate, UserOut
from config.logger import get_logger
from utils.exceptions import NotFoundError, UniquenessError
from utils.mapping import to_client_view
from utils.security import hash_password
from utils.store import guarded

log = get_logger(__name__)

USERNAME_TAKEN = 'expected `username` to be unique'


async def get_user_by_username(username: str) -> Optional[User]:
    user = await guarded(User.filter(username=username).first())
    return user


async def ensure_username_available(username: str) -> None:
    if await get_user_by_username(username):
        raise UniquenessError(USERNAME_TAKEN)


async def create_user(data: UserCreate) -> UserOut:
    await ensure_username_available(data.username)
    password_hash = await run_in_threadpool(hash_password, data.password)
    try:
        user = await guarded(User.create(username=data.username, name=data.name, password_hash=password_hash))
    except IntegrityError:
        # a concurrent insert won the race past the pre-check
        raise UniquenessError(USERNAME_TAKEN)
    log.info(f'created user {user.pk}')
    return to_client_view(user, UserOut)


async def list_users() -> List[UserOut]:
    users = await guarded(User.all().order_by('id'))
    return [to_client_view(user, UserOut) for user in users]


async def get_user(user_id: int) -> UserOut:
    user = await guarded(User.filter(id=user_id).first())
    if not user:
        raise NotFoundError('user not found')
    return to_client_view(user, UserOut)
