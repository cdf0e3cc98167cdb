import functools

from fastapi.responses import JSONResponse

from config.logger import get_logger
from utils.exceptions import APIError, StoreError

log = get_logger(__name__)


def error_response(error: APIError) -> JSONResponse:
    return JSONResponse(status_code=error.status_code, content={'error': error.message})


def response_wrapper(view):
    """Wrap a view so domain errors become ``{"error": ...}`` JSON responses.

    The wrapped function keeps the view's signature, so FastAPI still resolves
    its path parameters and the request object.
    """
    @functools.wraps(view)
    async def wrapper(*args, **kwargs):
        try:
            return await view(*args, **kwargs)
        except StoreError as e:
            log.exception(f'{view.__name__} failed: {e.message}')
            return error_response(e)
        except APIError as e:
            log.warning(f'{view.__name__} rejected request: {e.message}')
            return error_response(e)

    return wrapper
