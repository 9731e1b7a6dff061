import threading

import httpx
from forms_hubspot.config.settings import settings

_shared_client: httpx.AsyncClient | None = None
_shared_lock = threading.Lock()

def make_client(headers: dict | None = None) -> httpx.AsyncClient:
    return httpx.AsyncClient(
        timeout=settings.HTTP_TIMEOUT_S,
        headers=headers or {},
        follow_redirects=True,
    )

def get_shared_client() -> httpx.AsyncClient:
    """Process-wide client, created on first use and reused for pooling."""
    global _shared_client
    if _shared_client is None or _shared_client.is_closed:
        with _shared_lock:
            if _shared_client is None or _shared_client.is_closed:
                _shared_client = make_client()
    return _shared_client

async def close_shared_client() -> None:
    global _shared_client
    with _shared_lock:
        client, _shared_client = _shared_client, None
    if client is not None and not client.is_closed:
        await client.aclose()
