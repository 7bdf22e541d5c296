"""Shared Pydantic models used by the catalog service."""

from __future__ import annotations

from typing import Any

from pydantic import BaseModel


class ProductBase(BaseModel):
    # Values are kept exactly as the client sent them, no coercion.
    nome: Any = None
    preco: Any = None
    quantidade: Any = None


class ProductUpdate(ProductBase):
    imagem: Any = None


class Product(ProductUpdate):
    id: int


class HealthResponse(BaseModel):
    status: str
    service: str
