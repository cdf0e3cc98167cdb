import os
import sys
import warnings
from pathlib import Path

import pytest

# Ensure project root is importable during pytest collection
ROOT = Path(__file__).resolve().parents[1]
sys.path.insert(0, str(ROOT))

# Every TestClient session opens its own in-memory store, so each test starts empty
os.environ['DATABASE_URL'] = 'sqlite://:memory:'
os.environ.setdefault('LOG_LEVEL', 'WARNING')

# Suppress specific third-party deprecation warnings that surface during test collection
warnings.filterwarnings(
    "ignore",
    message="crypt is deprecated",
    category=DeprecationWarning,
    module=r"passlib.utils",
)

from fastapi.testclient import TestClient

from apps.blog.models import Blog
from apps.blog.schema import BlogOut
from apps.user.models import User
from apps.user.schema import UserOut
from main import app
from utils.mapping import to_client_view
from utils.security import hash_password

INITIAL_BLOGS = [
    {
        'title': 'React patterns',
        'author': 'Michael Chan',
        'url': 'https://reactpatterns.com/',
        'likes': 7,
    },
    {
        'title': 'Go To Statement Considered Harmful',
        'author': 'Edsger W. Dijkstra',
        'url': 'http://www.u.arizona.edu/~rubinson/copyright_violations/Go_To_Considered_Harmful.html',
        'likes': 5,
    },
]


@pytest.fixture
def client():
    with TestClient(app) as test_client:
        yield test_client


class StoreHelper:
    """Reads and seeds the store on the app's own event loop."""

    def __init__(self, client: TestClient):
        self.portal = client.portal

    def seed_blogs(self, blogs=INITIAL_BLOGS):
        async def _seed():
            for blog in blogs:
                await Blog.create(**blog)

        self.portal.call(_seed)

    def seed_user(self, username: str, password: str, name: str = None):
        async def _seed():
            await User.create(username=username, name=name, password_hash=hash_password(password))

        self.portal.call(_seed)

    def blogs_in_db(self):
        async def _read():
            return [to_client_view(blog, BlogOut).model_dump() for blog in await Blog.all().order_by('id')]

        return self.portal.call(_read)

    def users_in_db(self):
        async def _read():
            return [to_client_view(user, UserOut).model_dump() for user in await User.all().order_by('id')]

        return self.portal.call(_read)

    def raw_users(self):
        async def _read():
            return list(await User.all().order_by('id'))

        return self.portal.call(_read)


@pytest.fixture
def store(client):
    return StoreHelper(client)
