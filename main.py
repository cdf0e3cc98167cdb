from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from apps.blog.routers import router as blog_router
from apps.user.routers import router as user_router
from config.db import init_db, close_db
from config.logger import get_logger
from config.middleware import RequestLogMiddleware
from config.settings import HOST, PORT
from utils.exceptions import APIError
from utils.response_wrapper import error_response

log = get_logger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    log.info('bloglist starting')
    await init_db()
    yield
    await close_db()
    log.info('bloglist stopped')


app = FastAPI(title='Bloglist', version='0.1.0', lifespan=lifespan)
app.add_middleware(RequestLogMiddleware)
app.include_router(blog_router)
app.include_router(user_router)


@app.exception_handler(APIError)
async def api_error_handler(request: Request, exc: APIError):
    return error_response(exc)


@app.exception_handler(StarletteHTTPException)
async def http_error_handler(request: Request, exc: StarletteHTTPException):
    if exc.status_code == 404:
        return JSONResponse(status_code=404, content={'error': 'unknown endpoint'})
    return JSONResponse(status_code=exc.status_code, content={'error': str(exc.detail)})


if __name__ == '__main__':
    uvicorn.run('main:app', host=HOST, port=PORT)
