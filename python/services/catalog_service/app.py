"""Catalog Service — FastAPI application for managing products."""

from __future__ import annotations

import logging
import re
from pathlib import Path

from fastapi import APIRouter, Body, Depends, FastAPI, HTTPException, Request, Response
from fastapi.concurrency import run_in_threadpool
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import PlainTextResponse
from fastapi.staticfiles import StaticFiles

from catalog_common.models import HealthResponse, Product, ProductUpdate
from catalog_common.store import ProductStore
from catalog_service import config
from catalog_service.uploads import ensure_upload_dir, save_upload

logger = logging.getLogger(__name__)

_LEADING_INT = re.compile(r"\s*([+-]?[0-9]+)")

_CREATE_BODY = {
    "requestBody": {
        "required": True,
        "content": {
            "multipart/form-data": {
                "schema": {
                    "type": "object",
                    "properties": {
                        "nome": {"type": "string"},
                        "preco": {"type": "number"},
                        "quantidade": {"type": "integer"},
                        "imagem": {"type": "string", "format": "binary"},
                    },
                }
            }
        },
    }
}


class ProductNotFoundError(Exception):
    def __init__(self, raw_id: str):
        super().__init__(raw_id)
        self.raw_id = raw_id


def parse_id(raw: str) -> int | None:
    """Read a base-10 integer from the start of ``raw``, like JS parseInt.

    "12abc" gives 12; input with no leading digits gives None, which never
    matches a stored id.
    """
    match = _LEADING_INT.match(raw)
    if match is None:
        return None
    return int(match.group(1))


def _form_text(value):
    return value if isinstance(value, str) else None


def get_store(request: Request) -> ProductStore:
    return request.app.state.store


router = APIRouter()


@router.get("/health", response_model=HealthResponse)
def health():
    return HealthResponse(status="ok", service=config.SERVICE_NAME)


@router.get("/produtos", response_model=list[Product], summary="Lista todos os produtos")
def list_products(store: ProductStore = Depends(get_store)):
    return store.list()


@router.post(
    "/produtos",
    response_model=Product,
    status_code=201,
    summary="Cria um novo produto com upload de imagem",
    openapi_extra=_CREATE_BODY,
)
async def create_product(request: Request, store: ProductStore = Depends(get_store)):
    content_type = request.headers.get("content-type", "")
    fields = {}
    imagem = None

    if content_type.startswith(("multipart/form-data", "application/x-www-form-urlencoded")):
        form = await request.form()
        # File parts under a text field name are dropped, only strings are kept.
        fields = {key: _form_text(form.get(key)) for key in ("nome", "preco", "quantidade")}
        upload_dir = request.app.state.upload_dir
        imagem = await run_in_threadpool(save_upload, form.get(config.UPLOAD_FIELD), upload_dir)
    elif content_type.startswith("application/json"):
        try:
            body = await request.json()
        except ValueError:
            raise HTTPException(status_code=400, detail="JSON inválido")
        if isinstance(body, dict):
            fields = {key: body.get(key) for key in ("nome", "preco", "quantidade")}

    return store.create(imagem=imagem, **fields)


@router.get("/produtos/{product_id}", response_model=Product, summary="Obtém um produto pelo ID")
def get_product(product_id: str, store: ProductStore = Depends(get_store)):
    product = store.find_by_id(parse_id(product_id))
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


@router.put("/produtos/{product_id}", response_model=Product, summary="Atualiza um produto pelo ID")
def update_product(
    product_id: str,
    payload: ProductUpdate | None = Body(None),
    store: ProductStore = Depends(get_store),
):
    product = store.update(parse_id(product_id), payload or ProductUpdate())
    if product is None:
        raise ProductNotFoundError(product_id)
    return product


@router.delete(
    "/produtos/{product_id}",
    status_code=204,
    response_class=Response,
    summary="Exclui um produto pelo ID",
)
def delete_product(product_id: str, store: ProductStore = Depends(get_store)):
    if not store.remove_by_id(parse_id(product_id)):
        raise ProductNotFoundError(product_id)
    return Response(status_code=204)


async def product_not_found_handler(request: Request, exc: ProductNotFoundError):
    logger.info("Produto %r não encontrado (%s %s)", exc.raw_id, request.method, request.url.path)
    return PlainTextResponse(config.NOT_FOUND_MESSAGE, status_code=404)


def create_app(store: ProductStore | None = None, upload_dir: Path | None = None) -> FastAPI:
    app = FastAPI(
        title=config.API_TITLE,
        description=config.API_DESCRIPTION,
        version=config.API_VERSION,
        docs_url=config.DOCS_URL,
        redoc_url=None,
    )
    app.state.store = store if store is not None else ProductStore()
    app.state.upload_dir = ensure_upload_dir(Path(upload_dir or config.UPLOAD_DIR))

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_methods=["*"],
        allow_headers=["*"],
    )
    app.add_exception_handler(ProductNotFoundError, product_not_found_handler)
    app.include_router(router)
    app.mount(
        config.UPLOAD_URL_PREFIX,
        StaticFiles(directory=app.state.upload_dir),
        name="uploads",
    )
    return app

