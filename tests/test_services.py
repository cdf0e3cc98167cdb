import asyncio

import pytest
from tortoise.exceptions import ValidationError as FieldValidationError

from apps.blog.models import Blog
from apps.blog.schema import BlogOut
from apps.blog.validators import validate_blog
from apps.user.models import User
from apps.user.schema import UserOut
from apps.user.validators import validate_user
from utils.exceptions import StoreError, ValidationError
from utils.mapping import to_client_view
from utils.security import hash_password, verify_password
from utils.store import guarded
from utils.validation import parse_record_id


def test_validate_blog_defaults_likes_to_zero():
    result = validate_blog({'title': 'Type wars', 'url': 'http://blog.cleancoder.com/'})
    assert result.ok
    assert result.value.likes == 0
    assert result.value.author is None


def test_validate_blog_reports_every_missing_field():
    result = validate_blog({'author': 'Robert C. Martin', 'likes': 10})
    assert not result.ok
    assert isinstance(result.error, ValidationError)
    assert 'title is required' in result.error.message
    assert 'url is required' in result.error.message
    with pytest.raises(ValidationError):
        result.unwrap()


def test_validate_user_checks_lengths():
    assert validate_user({'username': 'mluukkai', 'password': 'salainen'}).ok

    result = validate_user({'username': 'ml', 'password': 'sa'})
    assert result.error.message == (
        'username must be at least 3 characters long; password must be at least 3 characters long'
    )


def test_validate_user_never_echoes_password():
    result = validate_user({'username': 'mluukkai', 'password': 'xy'})
    assert 'xy' not in result.error.message
    assert 'xy' not in repr(validate_user({'username': 'mluukkai', 'password': 'xyz'}).value)


def test_parse_record_id():
    assert parse_record_id('42') == 42
    for raw in ('abc', '0', '-3', '5a422b3a1b54a676234d17f9'):
        with pytest.raises(ValidationError):
            parse_record_id(raw)


def test_client_view_renames_primary_key():
    blog = Blog(id=7, title='React patterns', author='Michael Chan', url='https://reactpatterns.com/', likes=7)
    view = to_client_view(blog, BlogOut)
    assert view.model_dump() == {
        'id': '7',
        'title': 'React patterns',
        'author': 'Michael Chan',
        'url': 'https://reactpatterns.com/',
        'likes': 7,
    }


def test_client_view_drops_password_hash():
    user = User(id=1, username='root', name=None, password_hash='$2b$10$abc')
    view = to_client_view(user, UserOut)
    assert view.model_dump() == {'id': '1', 'username': 'root', 'name': None}


def test_hash_password_is_salted_and_verifiable():
    first = hash_password('sekret')
    second = hash_password('sekret')
    assert first != second
    assert 'sekret' not in first
    assert verify_password('sekret', first)
    assert verify_password('sekret', second)
    assert not verify_password('salainen', first)


def test_guarded_times_out(monkeypatch):
    monkeypatch.setattr('config.settings.STORE_TIMEOUT', 0.01)
    with pytest.raises(StoreError) as exc:
        asyncio.run(guarded(asyncio.sleep(1)))
    assert exc.value.status_code == 500


def test_guarded_passes_results_through():
    async def answer():
        return 42

    assert asyncio.run(guarded(answer())) == 42


def test_validate_blog_messages_name_the_rule():
    result = validate_blog({'title': 'x' * 501, 'url': 'http://example.com', 'likes': -1})
    assert result.error.message == 'title must be at most 500 characters long; likes must be at least 0'


def test_validate_blog_treats_null_likes_as_zero():
    result = validate_blog({'title': 'Type wars', 'url': 'http://blog.cleancoder.com/', 'likes': None})
    assert result.value.likes == 0


def test_validate_blog_rejects_blank_title():
    result = validate_blog({'title': '   ', 'url': 'http://blog.cleancoder.com/'})
    assert result.error.message == 'title is required'


def test_parse_record_id_rejects_ids_beyond_store_range():
    with pytest.raises(ValidationError):
        parse_record_id(str(2 ** 63))


@pytest.mark.parametrize('error', [OverflowError('int too large'), FieldValidationError('title: Length exceeds 500')])
def test_guarded_turns_refused_values_into_validation_errors(error):
    async def refuse():
        raise error

    with pytest.raises(ValidationError) as exc:
        asyncio.run(guarded(refuse()))
    assert exc.value.status_code == 400
