import logging

import uvicorn

from catalog_service import config
from catalog_service.app import create_app

logger = logging.getLogger("catalog_service")


class CatalogServer(uvicorn.Server):
    async def startup(self, sockets=None):
        await super().startup(sockets=sockets)
        # started stays False when the port could not be bound.
        if self.started:
            logger.info("Servidor rodando na porta %s", self.config.port)


def build_server(upload_dir=config.UPLOAD_DIR) -> CatalogServer:
    app = create_app(upload_dir=upload_dir)
    return CatalogServer(uvicorn.Config(app, host=config.HOST, port=config.PORT))


def main():
    config.configure_logging()
    build_server().run()


if __name__ == "__main__":
    main()
