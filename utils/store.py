import asyncio
from typing import Awaitable, TypeVar

from tortoise.exceptions import DBConnectionError, IntegrityError, OperationalError
from tortoise.exceptions import ValidationError as FieldValidationError

from config import settings
from config.logger import get_logger
from utils.exceptions import StoreError, ValidationError

log = get_logger(__name__)

T = TypeVar('T')

# largest integer a store column or primary key can hold
MAX_STORE_INT = 2 ** 63 - 1


async def guarded(call: Awaitable[T]) -> T:
    """Await a record store call with a timeout.

    Integrity errors are left for the caller to translate. Values the store
    refuses become a ValidationError, every other failure a StoreError.
    """
    try:
        return await asyncio.wait_for(call, timeout=settings.STORE_TIMEOUT)
    except IntegrityError:
        raise
    except (FieldValidationError, OverflowError) as e:
        log.warning(f'record store refused a value: {type(e).__name__}')
        raise ValidationError('value rejected by the record store') from e
    except asyncio.TimeoutError as e:
        log.error(f'record store call exceeded {settings.STORE_TIMEOUT}s')
        raise StoreError('record store timed out') from e
    except (DBConnectionError, OperationalError) as e:
        log.error(f'record store failure: {type(e).__name__}')
        raise StoreError('record store unavailable') from e
