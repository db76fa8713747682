"""Entrypoint that reads PORT from the environment, no shell expansion needed."""
import uvicorn

from hello_server.config import settings


def main() -> None:
    uvicorn.run(
        "hello_server.main:app",
        host=settings.host,
        port=settings.port,
        log_level=settings.log_level,
    )


if __name__ == "__main__":
    main()
