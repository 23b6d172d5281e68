"""Recover: a failing handler behind the recovery boundary.

Demonstrates:
- ``recoverer`` listed first, so it wraps everything below it
- ``request_logger`` logging each request before the handler runs
- the failure surfacing as a 500 response instead of a dropped connection

Run:
    HOST=127.0.0.1 PORT=9999 remux run app:router
"""

from remux import Request, Response, Router, recoverer, request_logger

router = Router()


async def panic(request: Request) -> Response:
    raise RuntimeError("some panic")


router.register_exact("GET", "/test", panic, recoverer, request_logger)
