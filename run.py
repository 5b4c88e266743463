"""Entrypoint that reads PORT from environment and serves the built SPA."""
import uvicorn

from app.config import Settings
from app.main import create_app


def announce(port: int) -> None:
    print(f"Server is running on port {port}")
    print(f"Access URL: http://localhost:{port}", flush=True)


def serve(settings: Settings) -> None:
    """Bind the listener, report it, then serve until terminated."""
    config = uvicorn.Config(
        create_app(settings),
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )
    server = uvicorn.Server(config)
    # Exits the process if the port cannot be bound
    sock = config.bind_socket()
    announce(settings.port)
    server.run(sockets=[sock])


if __name__ == "__main__":
    serve(Settings())
