from fastapi import Request, Response

from apps.blog.services import list_blogs, create_blog, get_blog, delete_blog
from apps.blog.validators import validate_blog
from utils.validation import parse_record_id, read_json_object


async def all_blogs(request: Request):
    return await list_blogs()


async def add_blog(request: Request):
    candidate = await read_json_object(request)
    data = validate_blog(candidate).unwrap()
    return await create_blog(data)


async def retrieve_blog(request: Request, blog_id: str):
    return await get_blog(parse_record_id(blog_id))


async def remove_blog(request: Request, blog_id: str):
    await delete_blog(parse_record_id(blog_id))
    return Response(status_code=204)
