from typing import Type, TypeVar

from pydantic import BaseModel
from tortoise.models import Model

View = TypeVar('View', bound=BaseModel)

# columns that exist in the store but never reach a client
INTERNAL_FIELDS = ('password_hash',)


def to_client_view(record: Model, view: Type[View]) -> View:
    """Shape a stored record for clients.

    The primary key is exposed as a string ``id`` whatever the store calls it,
    and internal fields are dropped before the view type is built.
    """
    data = {name: getattr(record, name) for name in record._meta.fields_db_projection}
    data.pop(record._meta.pk_attr, None)
    for name in INTERNAL_FIELDS:
        data.pop(name, None)
    data['id'] = str(record.pk)
    return view.model_validate(data)
