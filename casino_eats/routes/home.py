from fastapi import APIRouter

from casino_eats.configuration.settings import Configuration

configuration = Configuration()


class HomeRouter(APIRouter):
    def __init__(self, *args, **kwargs):
        super().__init__(*args, **kwargs)
        self.add_api_route("/", self.index, methods=["GET"])
        self.add_api_route("/health", self.health, methods=["GET"])

    async def index(self):
        return {"message": "Bienvenido a Casino EATS"}

    async def health(self):
        return {"status": "ok", "environment": configuration.environment}
