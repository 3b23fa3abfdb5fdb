import httpx

REQUEST_TIMEOUT_SECONDS = 3
CONNECT_TIMEOUT_SECONDS = 2
# how long an idle pooled connection is kept for reuse, not a TCP keep-alive probe interval
IDLE_CONNECTION_EXPIRY_SECONDS = 600


def create_http_client(user: str, password: str) -> httpx.AsyncClient:
    """
    One client per jenkins instance, authenticated with the instance credentials.
    Every request made through it is bounded by a short timeout, the long waits
    happen between requests while polling.
    """
    return httpx.AsyncClient(
        auth=httpx.BasicAuth(user, password),
        timeout=httpx.Timeout(REQUEST_TIMEOUT_SECONDS, connect=CONNECT_TIMEOUT_SECONDS),
        limits=httpx.Limits(keepalive_expiry=IDLE_CONNECTION_EXPIRY_SECONDS),
    )
