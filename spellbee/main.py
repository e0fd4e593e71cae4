from __future__ import annotations
from typing import Optional

import socketio
import uvicorn
from fastapi import Depends, FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from .config import Settings
from .context import AppContext, get_context
from .exceptions import SpellBeeError
from .logger import configure_logging, get_logger
from .routers import api
from .schemas import ValidateResponse

logger = get_logger(__name__)


def _describe_validation(exc: RequestValidationError) -> str:
    parts = []
    for err in exc.errors():
        loc = '.'.join(str(p) for p in err.get('loc', ()) if p not in ('body', 'query'))
        parts.append(f"{loc}: {err.get('msg')}" if loc else str(err.get('msg')))
    return '; '.join(parts) or 'Invalid request'


def create_app(settings: Optional[Settings] = None, sio: Optional[socketio.AsyncServer] = None) -> FastAPI:
    settings = settings or Settings.from_env()
    app = FastAPI(title="Spelling Bee Server", version="0.1.0")
    app.state.context = AppContext.build(settings, sio=sio)

    # CORS for REST
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=['*'],
        allow_headers=['*'],
    )

    @app.exception_handler(SpellBeeError)
    async def spellbee_error(request: Request, exc: SpellBeeError):
        if exc.status_code >= 500:
            logger.error("%s %s failed: %s", request.method, request.url.path, exc)
        return JSONResponse(status_code=exc.status_code, content={'error': str(exc)})

    @app.exception_handler(RequestValidationError)
    async def validation_error(request: Request, exc: RequestValidationError):
        return JSONResponse(status_code=400, content={'error': _describe_validation(exc)})

    app.include_router(api.router)

    # Single word lookup against the loaded dictionary
    @app.get('/dict/validate', response_model=ValidateResponse)
    async def validate_word(word: str, ctx: AppContext = Depends(get_context)):
        return ValidateResponse(word=word.strip().upper(), valid=ctx.dictionary.is_valid(word))

    return app


settings = Settings.from_env()
configure_logging(settings.log_level)

# Socket.IO server (ASGI)
_origins = '*' if '*' in settings.cors_origins else settings.cors_origins
sio = socketio.AsyncServer(async_mode='asgi', cors_allowed_origins=_origins)
app = create_app(settings, sio=sio)

# Mount Socket.IO ASGI application
asgi_app = socketio.ASGIApp(sio, other_asgi_app=app)

# Socket.IO Events
@sio.event
async def connect(sid, environ, auth=None):
    await sio.emit('pong', to=sid)

@sio.on('ping')
async def on_ping(sid):
    await sio.emit('pong', to=sid)

@sio.on('reports:list')
async def reports_list(sid):
    ctx: AppContext = app.state.context
    await sio.emit('reports:list', ctx.reports.read_all(), to=sid)

# Export ASGI app for uvicorn
application = asgi_app


def run() -> None:
    uvicorn.run(application, host=settings.host, port=settings.port)

# For local running: uvicorn spellbee.main:application --reload --host 0.0.0.0 --port 8000
