"""Run the API with uvicorn using the configured host and port."""

from __future__ import annotations

import uvicorn

from shoesclean.api.api_config import get_api_config


def main() -> None:
    config = get_api_config()
    uvicorn.run("shoesclean.api.app:app", host=config.host, port=config.port)


if __name__ == "__main__":
    main()
