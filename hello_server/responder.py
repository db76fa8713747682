"""Constant responder: every request gets the same reply."""

from starlette.responses import Response
from starlette.types import Receive, Scope, Send
from starlette.websockets import WebSocketClose

HELLO_BODY = "Hello World!"


async def hello(scope: Scope, receive: Receive, send: Send) -> None:
    """Answer 200 with HELLO_BODY, whatever the method, target, headers or body.

    Installed as the router's fallback app, so it sees every request,
    including `OPTIONS *` and absolute-form targets that no path route
    can match.
    """
    if scope["type"] == "websocket":
        await WebSocketClose()(scope, receive, send)
        return

    # No media_type: only content-length is added.
    response = Response(HELLO_BODY, status_code=200)
    await response(scope, receive, send)
