import logging

import uvicorn
from rich.logging import RichHandler

from restaurant.config import Config


def main() -> None:
    logging.basicConfig(
        level=logging.INFO,
        format="%(message)s",
        handlers=[RichHandler(rich_tracebacks=True)],
    )
    cfg = Config()
    uvicorn.run("restaurant.app:app", host=cfg.host, port=cfg.port, log_config=None)


if __name__ == "__main__":
    main()
