"""In-memory product store shared by the catalog service handlers."""

from __future__ import annotations

import logging
import threading
from typing import Any

from catalog_common.models import Product, ProductUpdate

logger = logging.getLogger(__name__)


class ProductStore:
    """Ordered, lock-guarded list of products.

    Ids are ``len(records) + 1`` at creation time by default, so an id freed
    by a delete can be handed out again. Pass ``monotonic_ids=True`` to use a
    counter that never repeats.
    """

    def __init__(self, monotonic_ids: bool = False):
        self._products: list[Product] = []
        self._lock = threading.Lock()
        self._monotonic_ids = monotonic_ids
        self._last_id = 0

    def _next_id(self) -> int:
        if self._monotonic_ids:
            self._last_id += 1
            return self._last_id
        return len(self._products) + 1

    def list(self) -> list[Product]:
        with self._lock:
            return list(self._products)

    def find_by_id(self, product_id: int | None) -> Product | None:
        with self._lock:
            return self._find(product_id)

    def _find(self, product_id: int | None) -> Product | None:
        for product in self._products:
            if product.id == product_id:
                return product
        return None

    def append(self, fields: dict[str, Any]) -> Product:
        with self._lock:
            product = Product(id=self._next_id(), **fields)
            self._products.append(product)
        logger.info("Produto %s criado", product.id)
        return product

    def create(self, nome=None, preco=None, quantidade=None, imagem=None) -> Product:
        return self.append(
            {"nome": nome, "preco": preco, "quantidade": quantidade, "imagem": imagem}
        )

    def update(self, product_id: int | None, changes: ProductUpdate) -> Product | None:
        # Every mutable field is overwritten, omitted ones become None.
        with self._lock:
            product = self._find(product_id)
            if product is None:
                return None
            product.nome = changes.nome
            product.preco = changes.preco
            product.imagem = changes.imagem
            product.quantidade = changes.quantidade
        logger.info("Produto %s atualizado", product_id)
        return product

    def remove_by_id(self, product_id: int | None) -> bool:
        with self._lock:
            for index, product in enumerate(self._products):
                if product.id == product_id:
                    del self._products[index]
                    break
            else:
                return False
        logger.info("Produto %s removido", product_id)
        return True

