"""Fixed settings for the catalog service. There is no env or file override."""

from __future__ import annotations

import logging
from pathlib import Path

SERVICE_NAME = "catalog-service"

HOST = "0.0.0.0"
PORT = 3000

UPLOAD_DIR = Path("uploads")
UPLOAD_URL_PREFIX = "/uploads"
UPLOAD_FIELD = "imagem"

DOCS_URL = "/api-docs"
API_TITLE = "API de Vendas"
API_DESCRIPTION = "Documentação da API de Vendas"
API_VERSION = "1.0.0"

NOT_FOUND_MESSAGE = "Produto não encontrado"

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"


def configure_logging(level: int = logging.INFO) -> None:
    logging.basicConfig(level=level, format=LOG_FORMAT)
