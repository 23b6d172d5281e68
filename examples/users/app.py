"""Users: exact and pattern routes over an in-memory store.

Demonstrates:
- exact routes taking priority over a pattern that also matches
- named and positional captures read with ``get_params``
- a custom fallback
- a lock around shared state, since handlers run concurrently

Run:
    remux run app:router
"""

import re
import threading

from remux import NoParameters, Request, Response, Router, get_params, recoverer

router = Router()

_users: dict[str, str] = {"1": "alice", "2": "bob"}
_lock = threading.Lock()

USER = re.compile(r"^/users/(?P<id>\d+)$")
USER_FIELD = re.compile(r"^/users/(\d+)/(name|upper)$")
ANY_USER_PATH = re.compile(r"^/users/(?P<rest>.+)$")


def _describe(request: Request) -> str:
    try:
        params = get_params(request)
    except NoParameters:
        return "no params"
    return f"named={dict(params.named)} positional={list(params.positional)}"


@router.route("GET", "/users")
async def list_users(request: Request) -> Response:
    with _lock:
        names = ",".join(_users[key] for key in sorted(_users))
    return Response(names)


@router.route("GET", "/users/me")
async def me(request: Request) -> Response:
    return Response(f"me ({_describe(request)})")


@router.route("GET", USER, recoverer)
async def get_user(request: Request) -> Response:
    user_id = get_params(request)["id"]
    with _lock:
        name = _users.get(user_id)
    if name is None:
        return Response(f"no user {user_id}", status=404)
    return Response(name)


@router.route("GET", USER_FIELD)
async def get_user_field(request: Request) -> Response:
    params = get_params(request)
    with _lock:
        name = _users.get(params[0], "")
    return Response(name.upper() if params[1] == "upper" else name)


@router.route("GET", ANY_USER_PATH)
async def catch_all(request: Request) -> Response:
    return Response(f"unknown user path: {get_params(request)['rest']}", status=404)


@router.route("PUT", USER)
async def put_user(request: Request) -> Response:
    user_id = get_params(request)["id"]
    name = request.headers.get("x-name", "")
    with _lock:
        created = user_id not in _users
        _users[user_id] = name
    return Response(name, status=201 if created else 200)


async def fallback(request: Request) -> Response:
    return Response(f"nothing at {request.method} {request.path}", status=404)


router.set_fallback(fallback)
