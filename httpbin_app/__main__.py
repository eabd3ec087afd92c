"""Command-line entry point: `python -m httpbin_app [--listen host:port]`."""

import argparse

import uvicorn

from httpbin_app.config import get_settings
from httpbin_app.main import create_app


def main() -> None:
    settings = get_settings()
    parser = argparse.ArgumentParser(prog="httpbin-app")
    parser.add_argument(
        "--listen", default=settings.listen, help="<host:port> (default %(default)s)",
    )
    args = parser.parse_args()

    settings = settings.model_copy(update={"listen": args.listen})
    host, port = settings.listen_address()
    uvicorn.run(
        create_app(settings), host=host, port=port,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
