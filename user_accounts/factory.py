"""Application factory for the accounts service."""

import logging
from typing import Any, Callable, Optional

from fastapi import FastAPI, Request, status
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, Response
from fastapi.staticfiles import StaticFiles

from . import config
from .app_logging import setup_logger
from .context import AccountsContext
from .exceptions import AccountsError
from .routes import router
from .services.accounts import AccountStore
from .services.uploads import UploadStorage

CORS_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
CORS_HEADERS = ["Content-Type", "Authorization"]


def create_app(store: Optional[AccountStore] = None, **overrides: Any) -> FastAPI:
    """
    Initialize and configure the accounts application.

    Parameters
    ----------
    store : :class:`.AccountStore` or None
        Account store to use. If None, one is created for ``DATABASE_URI``.
    overrides
        Values that replace those in :mod:`user_accounts.config`.

    """
    settings = config.defaults()
    unknown = set(overrides) - set(settings)
    if unknown:
        raise TypeError(f'Unknown settings: {", ".join(sorted(unknown))}')
    settings.update(overrides)

    setup_logger(settings['LOGLEVEL'])
    logger = logging.getLogger(__name__)

    samesite = str(settings['SESSION_COOKIE_SAMESITE']).lower()
    settings['SESSION_COOKIE_SAMESITE'] = samesite
    if samesite == 'none' and not settings['SESSION_COOKIE_SECURE']:
        logger.warning("SESSION_COOKIE_SECURE is off while SameSite is none;"
                       " browsers will drop the session cookie.")

    if store is None:
        store = AccountStore.from_uri(settings['DATABASE_URI'])
    if settings['CREATE_DB']:
        store.create_all()

    profile_images = UploadStorage(settings['UPLOAD_ROOT'],
                                   settings['PROFILE_IMAGE_DIR'],
                                   settings['UPLOAD_URL_PREFIX'])
    profile_images.init()
    context = AccountsContext(store=store, profile_images=profile_images)

    app = FastAPI(context=context, **settings)

    origins = [origin.strip()
               for origin in str(settings['CORS_ORIGINS']).split(',')
               if origin.strip()]
    logger.info(f"cors origins: {','.join(origins)}")
    logger.info(f"UPLOAD_ROOT: {settings['UPLOAD_ROOT']}")

    register_error_handlers(app)

    @app.middleware("http")
    async def handle_unexpected_errors(request: Request,
                                       call_next: Callable) -> Response:
        """Turn any unhandled error into a generic 500 response."""
        try:
            return await call_next(request)
        except Exception:
            logger.exception('Unhandled error for %s %s', request.method,
                             request.url.path)
            return server_error()

    app.add_middleware(
        CORSMiddleware,
        allow_origins=origins,
        allow_credentials=True,
        allow_methods=CORS_METHODS,
        allow_headers=CORS_HEADERS,
    )

    app.include_router(router)
    app.mount(settings['UPLOAD_URL_PREFIX'],
              StaticFiles(directory=settings['UPLOAD_ROOT']),
              name='uploads')
    return app


def register_error_handlers(app: FastAPI) -> None:
    """Register error handlers for the app."""
    app.add_exception_handler(AccountsError, jsonify_exception)
    app.add_exception_handler(RequestValidationError, jsonify_invalid_request)


async def jsonify_exception(request: Request, error: AccountsError) -> Response:
    """Render accounts errors as JSON."""
    if error.status_code >= 500:
        logging.getLogger(__name__).error('Request failed: %s', error,
                                          exc_info=error)
        return server_error()
    return JSONResponse({'error': error.message},
                        status_code=error.status_code)


async def jsonify_invalid_request(request: Request,
                                  error: RequestValidationError) -> Response:
    return JSONResponse({'error': 'Invalid request'},
                        status_code=status.HTTP_400_BAD_REQUEST)


def server_error() -> Response:
    return JSONResponse({'error': 'Server error'},
                        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR)
