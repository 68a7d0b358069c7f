import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from markupsafe import Markup
from pydantic import BaseModel, ValidationError
from starlette.applications import Starlette
from starlette.middleware import Middleware
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import HTMLResponse, JSONResponse, RedirectResponse, Response
from starlette.routing import Route

from kitchen import config
from kitchen.domain.catalogue import DEFAULT_UNIT, UNITS, default_unit, suggest
from kitchen.domain.errors import GenerationInProgress
from kitchen.domain.models import GenerationError, GenerationRequest
from kitchen.domain.services import RecipeService
from kitchen.domain.session import InMemorySessionStore, KitchenSession
from kitchen.html import RecipeResult


logger = logging.getLogger(__name__)


SESSION_COOKIE = "kitchen_session"
STATELESS_PREFIXES = ("/api/", "/health")


class IngredientIn(BaseModel):
    name: str
    quantity: str | None = None
    id: str | None = None


class GenerateIn(BaseModel):
    ingredients: list[IngredientIn] | None = None


def aHTMLResponse(route: Callable[..., Awaitable[str | tuple[str, int]]]):
    @functools.wraps(route)
    async def wrapper(*args: Any, **kwargs: Any) -> HTMLResponse:
        resp = await route(*args, **kwargs)
        if not isinstance(resp, tuple):
            html, code = resp, 200
        else:
            html, code = resp
        return HTMLResponse(html, status_code=code)

    return wrapper


async def session_middleware(
    request: Request, call_next: RequestResponseEndpoint
) -> Response:
    if request.url.path.startswith(STATELESS_PREFIXES):
        return await call_next(request)

    sessions: InMemorySessionStore = request.app.state.sessions
    cookie = request.cookies.get(SESSION_COOKIE)
    request.state.session = sessions.get_or_create(cookie)

    response = await call_next(request)
    if request.state.session.id != cookie:
        response.set_cookie(
            SESSION_COOKIE, request.state.session.id, httponly=True, samesite="lax"
        )
    return response


def templates(request: Request) -> Environment:
    return request.app.state.templates


def kitchen_session(request: Request) -> KitchenSession:
    return request.state.session


@aHTMLResponse
async def homepage(request: Request) -> str:
    session = kitchen_session(request)
    result = RecipeResult(session.result, environment=templates(request))
    return (
        templates(request)
        .get_template("index.html")
        .render(
            stock=session.stock.list(),
            pending=session.pending,
            units=UNITS,
            unit=DEFAULT_UNIT,
            result=Markup(result.render()),
        )
    )


async def add_ingredient(request: Request) -> RedirectResponse:
    async with request.form() as form:
        name = str(form.get("name", ""))
        amount = str(form.get("amount", ""))
        unit = str(form.get("unit", DEFAULT_UNIT))

    entry = kitchen_session(request).stock.add(name, amount, unit)
    if entry is None:
        logger.info("Ignored ingredient %r (%r %r)", name, amount, unit)
    return RedirectResponse("/", status_code=303)


async def remove_ingredient(request: Request) -> RedirectResponse:
    kitchen_session(request).stock.remove(request.path_params["id"])
    return RedirectResponse("/", status_code=303)


@aHTMLResponse
async def suggestions(request: Request) -> str:
    names = suggest(request.query_params.get("name", ""))
    return templates(request).get_template("suggestions.html").render(names=names)


@aHTMLResponse
async def units(request: Request) -> str:
    name = request.query_params.get("name", "").strip()
    current = request.query_params.get("unit") or DEFAULT_UNIT
    unit = default_unit(name) or current
    return (
        templates(request)
        .get_template("units.html")
        .render(units=UNITS, unit=unit)
    )


async def generate(request: Request) -> Response:
    session = kitchen_session(request)
    service: RecipeService = request.app.state.service
    try:
        await session.submit(service)
    except GenerationInProgress:
        html = templates(request).get_template("busy.html").render()
        return HTMLResponse(html, status_code=409)
    return RedirectResponse("/", status_code=303)


async def api_generate(request: Request) -> JSONResponse:
    try:
        body = GenerateIn.model_validate_json(await request.body())
    except ValidationError as e:
        logger.info("Rejected generate payload: %s", e.errors())
        return JSONResponse(
            {"error": "Invalid request body", "code": "invalid_request"},
            status_code=400,
        )

    generation_request = GenerationRequest.from_payload(
        i.model_dump() for i in body.ingredients or []
    )
    service: RecipeService = request.app.state.service
    result = await service.generate(generation_request)
    if isinstance(result, GenerationError):
        return JSONResponse(result.to_dict(), status_code=result.status_code)
    return JSONResponse(result.to_dict())


async def health(request: Request) -> JSONResponse:
    return JSONResponse({"status": "ok"})


@contextlib.asynccontextmanager
async def lifespan(app: Starlette) -> AsyncIterator[None]:
    yield
    await app.state.service.close()


def create_app(
    conf: config.Config | None = None,
    *,
    service: RecipeService | None = None,
) -> Starlette:
    conf = config.Config() if conf is None else conf

    app = Starlette(
        debug=True if conf.env == config.Env.local else False,
        routes=[
            Route("/", homepage),
            Route("/stock", add_ingredient, methods=["POST"]),
            Route("/stock/{id}/delete", remove_ingredient, methods=["POST"]),
            Route("/suggestions", suggestions),
            Route("/units", units),
            Route("/generate", generate, methods=["POST"]),
            Route("/api/generate", api_generate, methods=["POST"]),
            Route("/health", health),
        ],
        middleware=[Middleware(BaseHTTPMiddleware, dispatch=session_middleware)],
        lifespan=lifespan,
    )

    app.state.config = conf
    app.state.templates = Environment(
        loader=FileSystemLoader(conf.html_dir),
        autoescape=select_autoescape(),
    )
    app.state.service = RecipeService(conf) if service is None else service
    app.state.sessions = InMemorySessionStore(ttl_seconds=conf.session_ttl)
    return app
