from fastapi import FastAPI

from app.config import DEFAULT_PORT, Settings, get_settings
from app.infrastructure.server import GreetingServer
from app.interfaces.api.routes import register_routes


def create_app(settings: Settings | None = None) -> FastAPI:
    """Create and configure the FastAPI application."""

    app = FastAPI()
    app.state.settings = settings or get_settings()

    register_routes(app)
    return app


def start(port: int = DEFAULT_PORT) -> None:
    """Bind the listener on ``port`` on every interface and serve forever.

    A :class:`~app.infrastructure.server.StartupBindError` propagates to the
    caller, so running this module exits non-zero when the port is taken.
    """

    settings = Settings(port=port)
    GreetingServer(create_app(settings), settings).serve_forever()


app = create_app()


if __name__ == "__main__":
    start(DEFAULT_PORT)
