# blog/routers.py
from typing import List

from fastapi import APIRouter, Response

from config.settings import API_PREFIX
from utils.response_wrapper import response_wrapper
from .schema import BlogOut
from .views import all_blogs, add_blog, retrieve_blog, remove_blog

router = APIRouter(prefix=f"{API_PREFIX}/blogs", tags=["blogs"])

router.get("", response_model=List[BlogOut])(response_wrapper(all_blogs))
router.post("", status_code=201, response_model=BlogOut)(response_wrapper(add_blog))
router.get("/{blog_id}", response_model=BlogOut)(response_wrapper(retrieve_blog))
router.delete("/{blog_id}", status_code=204, response_class=Response)(response_wrapper(remove_blog))
