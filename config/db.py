from tortoise import Tortoise, connections

from config.logger import get_logger
from config.settings import DATABASE_URL

log = get_logger(__name__)

MODEL_MODULES = ['apps.blog.models', 'apps.user.models']


def tortoise_config(db_url: str = None) -> dict:
    return {
        'connections': {'default': db_url or DATABASE_URL},
        'apps': {
            'models': {
                'models': MODEL_MODULES,
                'default_connection': 'default',
            },
        },
    }


async def init_db(db_url: str = None) -> None:
    """Open the record store connection and create missing tables."""
    await Tortoise.init(config=tortoise_config(db_url))
    await Tortoise.generate_schemas(safe=True)
    log.info('record store ready')


async def close_db() -> None:
    await connections.close_all()
    log.info('record store connections closed')
