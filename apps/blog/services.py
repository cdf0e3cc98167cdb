from typing import List

from apps.blog.models import Blog
from apps.blog.schema import BlogCreate, BlogOut
from config.logger import get_logger
from utils.exceptions import NotFoundError
from utils.mapping import to_client_view
from utils.store import guarded

log = get_logger(__name__)


async def list_blogs() -> List[BlogOut]:
    blogs = await guarded(Blog.all().order_by('id'))
    return [to_client_view(blog, BlogOut) for blog in blogs]


async def create_blog(data: BlogCreate) -> BlogOut:
    blog = await guarded(Blog.create(**data.model_dump()))
    log.info(f'created blog {blog.pk}')
    return to_client_view(blog, BlogOut)


async def get_blog(blog_id: int) -> BlogOut:
    blog = await guarded(Blog.filter(id=blog_id).first())
    if not blog:
        raise NotFoundError('blog not found')
    return to_client_view(blog, BlogOut)


async def delete_blog(blog_id: int) -> bool:
    """Remove a blog; returns whether anything was deleted."""
    deleted = await guarded(Blog.filter(id=blog_id).delete())
    if deleted:
        log.info(f'deleted blog {blog_id}')
    return bool(deleted)
