"""
Callback client example using http_callback_message.

This example wires Request and Response objects to a toy asyncio
transport that answers every request from a table instead of the
network, the way a test double for a real callback-based client would.
"""

import asyncio
import logging

from http_callback_message import Request, Response, response_handler

# Configure logging
logging.basicConfig(level=logging.DEBUG)
logger = logging.getLogger(__name__)


CANNED = {
    "http://example.com/": ("<h1>hello</h1>", {"content-type": "text/html", "Status": 200, "Reason": "OK"}),
}


def table_transport(method, uri, *args):
    """Answer from CANNED on the next loop iteration."""
    *options, callback = args
    request = Request(method, uri, *options, callback)
    logger.info(f"Transport got {request.method} {request.uri} headers={request.headers}")
    
    body, headers = CANNED.get(uri, ("", {"Status": 404, "Reason": "Not Found"}))
    handle = asyncio.get_running_loop().call_soon(callback, body, dict(headers, URL=uri))
    return handle


async def main():
    """Send two requests and wait for both callbacks."""
    loop = asyncio.get_running_loop()
    done = {uri: loop.create_future() for uri in ("http://example.com/", "http://example.com/missing")}
    
    for uri, future in done.items():
        @response_handler
        def on_response(response: Response, future=future) -> None:
            future.set_result(response)
        
        request = Request({
            "method": "get",
            "uri": uri,
            "headers": {"User_Agent": "callback-example/0.1"},
            "params": {"timeout": 5},
            "callback": on_response,
        })
        logger.info(f"Arguments: {request.args()}")
        request.send(table_transport)
    
    for uri, future in done.items():
        response = await future
        logger.info(
            f"{uri}: {response.pseudo_headers['Status']} {response.pseudo_headers['Reason']} "
            f"body={response.body!r} headers={response.headers}"
        )


if __name__ == "__main__":
    asyncio.run(main())
