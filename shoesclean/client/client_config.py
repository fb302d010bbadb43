# This file defines runtime configuration for the API client.
# The base URL is an explicit setting injected at startup; the client never guesses it from the host it runs on.

from __future__ import annotations

import os
from dataclasses import dataclass

from dotenv import load_dotenv


@dataclass(frozen=True)
class ClientConfig:
    base_url: str
    timeout_seconds: int = 8


def load_client_config(*, load_env: bool = True) -> ClientConfig:
    if load_env:
        load_dotenv()

    base_url = os.getenv("SHOESCLEAN_API_BASE_URL")
    if not base_url:
        api_host = os.getenv("API_HOST", "localhost")
        if api_host == "0.0.0.0":
            api_host = "localhost"
        api_port = os.getenv("API_PORT", "8000")
        base_url = f"http://{api_host}:{api_port}"

    return ClientConfig(
        base_url=base_url.rstrip("/"),
        timeout_seconds=int(os.getenv("SHOESCLEAN_API_TIMEOUT_SECONDS", "8")),
    )
