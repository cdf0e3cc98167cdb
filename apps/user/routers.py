# user/routers.py
from typing import List

from fastapi import APIRouter

from config.settings import API_PREFIX
from utils.response_wrapper import response_wrapper
from .schema import UserOut
from .views import add_user, all_users, retrieve_user

router = APIRouter(prefix=f"{API_PREFIX}/users", tags=["users"])

router.post("", status_code=201, response_model=UserOut)(response_wrapper(add_user))
router.get("", response_model=List[UserOut])(response_wrapper(all_users))
router.get("/{user_id}", response_model=UserOut)(response_wrapper(retrieve_user))
