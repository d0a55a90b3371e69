import contextlib
import functools
import logging
from typing import Any, AsyncIterator, Awaitable, Callable

from jinja2 import Environment, FileSystemLoader, select_autoescape
from starlette.applications import Starlette
from starlette.requests import Request
from starlette.responses import HTMLResponse, RedirectResponse
from starlette.routing import Route

from restaurant import config, db
from restaurant.domain.repository import (
    OrderRepository,
    PersistenceError,
    StoreUnavailable,
)
from restaurant.domain.services import MissingField, list_orders, place_order, require
from restaurant.html.listing import OrderListing


logger = logging.getLogger(__name__)


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


def error_page(request: Request, message: str, code: int) -> tuple[str, int]:
    templates: Environment = request.app.state.templates
    return templates.get_template("error.html").render(message=message), code


@aHTMLResponse
async def homepage(request: Request) -> str | tuple[str, int]:
    repo: OrderRepository = request.app.state.repo
    try:
        orders = await list_orders(repository=repo)
    except StoreUnavailable:
        logger.warning("Order listing unavailable, responding 503")
        return error_page(request, "Error retrieving customers", 503)
    return OrderListing(orders, environment=request.app.state.templates).render()


async def add_customer(request: Request) -> HTMLResponse | RedirectResponse:
    try:
        async with request.form() as form:
            name = require(form.get("name"), "name")
            phone = require(form.get("phone"), "phone")
            ordered_items = require(form.get("orderedItems"), "orderedItems")
    except MissingField as e:
        logger.info("Rejected order, missing form field %s", e)
        html, code = error_page(request, f"Missing form field: {e}", 400)
        return HTMLResponse(html, status_code=code)
    except ValueError:
        # python-multipart parse errors are ValueErrors.
        logger.info("Rejected order, unparsable form body")
        html, code = error_page(request, "Invalid form data", 400)
        return HTMLResponse(html, status_code=code)

    repo: OrderRepository = request.app.state.repo
    try:
        await place_order(
            name=name,
            phone=phone,
            ordered_items=ordered_items,
            repository=repo,
        )
    except PersistenceError:
        logger.warning("Order for %s not stored, responding 500", name)
        html, code = error_page(request, "Error saving customer", 500)
        return HTMLResponse(html, status_code=code)
    return RedirectResponse("/", status_code=303)


def create_app(
    repository: OrderRepository | None = None,
    *,
    cfg: config.Config | None = None,
) -> Starlette:
    """Build the app. Without a repository one is connected on startup."""
    cfg = config.Config() if cfg is None else cfg

    @contextlib.asynccontextmanager
    async def lifespan(app: Starlette) -> AsyncIterator[None]:
        if repository is not None:
            yield
            return
        client = db.client_factory(cfg)
        try:
            # A store that cannot be reached at startup stops the process.
            await db.connect(client)
            app.state.repo = db.order_repository(client, cfg)
            yield
        finally:
            client.close()

    app = Starlette(
        debug=True if cfg.env == config.Env.local else False,
        routes=[
            Route("/", homepage, methods=["GET"]),
            Route("/add-customer", add_customer, methods=["POST"]),
        ],
        lifespan=lifespan,
    )
    app.state.templates = Environment(
        loader=FileSystemLoader(cfg.html_dir),
        autoescape=select_autoescape(),
    )
    if repository is not None:
        app.state.repo = repository
    return app


app = create_app()
