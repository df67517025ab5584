"""Provides the HTTP interface of the accounts service."""

import logging
from typing import Any, Dict, Optional

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse, PlainTextResponse, Response
from starlette.concurrency import run_in_threadpool
from starlette.datastructures import UploadFile

from .context import AccountsContext, get_context
from .controllers import ResponseData, authentication, profile
from .exceptions import ValidationError

logger = logging.getLogger(__name__)

router = APIRouter()


def session_cookie(request: Request) -> Optional[str]:
    """Get the value of the session cookie, if any."""
    return request.cookies.get(request.app.extra['SESSION_COOKIE_NAME'])


async def form_or_json(request: Request) -> Dict[str, Any]:
    """Parse a JSON, urlencoded or multipart request body into a dict."""
    content_type = request.headers.get('content-type', '')
    if content_type.startswith('application/json'):
        body = await request.body()
        if not body:
            return {}
        try:
            data = await request.json()
        except ValueError as e:
            raise ValidationError('Invalid request body') from e
        if not isinstance(data, dict):
            raise ValidationError('Invalid request body')
        return data
    if content_type.startswith(('application/x-www-form-urlencoded',
                                'multipart/form-data')):
        form = await request.form()
        return {key: value for key, value in form.items()
                if isinstance(value, str)}
    return {}


async def uploaded_file(request: Request, field: str) -> Optional[UploadFile]:
    """
    Get the file sent in multipart field ``field``.

    Anything that is not a file (a plain text part, or a body that is not
    multipart at all) counts as no file.
    """
    if not request.headers.get('content-type', '').startswith(
            'multipart/form-data'):
        return None
    form = await request.form()
    value = form.get(field)
    return value if isinstance(value, UploadFile) else None


def set_cookies(request: Request, response: Response,
                cookies: Optional[dict]) -> None:
    """
    Update a :class:`.Response` with cookies from controller data.

    Controllers seeking to update cookies must include a 'cookies' key
    in their response data.
    """
    if cookies is None:
        return None
    extra = request.app.extra
    for cookie_key, (cookie_value, max_age) in cookies.items():
        cookie_name = extra[f'{cookie_key.upper()}_NAME']
        logger.debug('Set cookie %s, max_age %s', cookie_name, max_age)
        response.set_cookie(cookie_name, cookie_value, max_age=max_age,
                            path='/', httponly=True,
                            secure=extra['SESSION_COOKIE_SECURE'],
                            samesite=extra['SESSION_COOKIE_SAMESITE'])


def make_response(request: Request, result: ResponseData) -> Response:
    data, code, headers = result
    cookies = data.pop('cookies', None)
    response = JSONResponse(content=data, status_code=code, headers=headers)
    set_cookies(request, response, cookies)
    return response


@router.get('/')
async def root() -> Response:
    """Tell whether the service is up."""
    return PlainTextResponse('Backend is running')


@router.post('/register')
async def register(request: Request,
                   context: AccountsContext = Depends(get_context)) -> Response:
    """Create an account and log in."""
    form_data = await form_or_json(request)
    extra = request.app.extra
    logger.debug('Request to register %s', form_data.get('username'))
    result = await run_in_threadpool(
        authentication.register, form_data, context.store,
        extra['SESSION_COOKIE_MAX_AGE'],
        allowed_domain=extra['ALLOWED_EMAIL_DOMAIN'],
        rounds=extra['BCRYPT_ROUNDS']
    )
    return make_response(request, result)


@router.post('/login')
async def login(request: Request,
                context: AccountsContext = Depends(get_context)) -> Response:
    """Log in with e-mail and password."""
    form_data = await form_or_json(request)
    result = await run_in_threadpool(
        authentication.login, form_data, context.store,
        request.app.extra['SESSION_COOKIE_MAX_AGE']
    )
    return make_response(request, result)


@router.get('/check')
async def check(request: Request) -> Response:
    """Report the logged-in user, if any."""
    return make_response(request, authentication.check(session_cookie(request)))


@router.get('/logout')
async def logout(request: Request) -> Response:
    """Log out."""
    return make_response(request, authentication.logout())


@router.post('/upload-profile')
async def upload_profile(request: Request,
                         context: AccountsContext = Depends(get_context)
                         ) -> Response:
    """Replace the profile image of the logged-in user."""
    upload = await uploaded_file(request, 'profileImage')
    stream = upload.file if upload is not None else None
    filename = upload.filename if upload is not None else None
    result = await run_in_threadpool(
        profile.upload_profile_image, session_cookie(request), stream,
        filename, context.store, context.profile_images
    )
    return make_response(request, result)
