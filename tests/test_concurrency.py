"""Concurrent registration and dispatch against a single Router."""

import re
import threading

import anyio
import anyio.to_thread

from remux.http.request import Request
from remux.http.response import Response
from remux.routing.params import get_params
from remux.routing.router import Router

N = 50


def _responder(body: str):
    async def handler(request: Request) -> Response:
        return Response(body)

    return handler


class TestConcurrentRegistration:
    async def test_threads_register_then_dispatch(self) -> None:
        router = Router()

        def register(i: int) -> None:
            router.register_exact("GET", f"/exact/{i}", _responder(f"exact-{i}"))
            router.register_pattern(
                "POST", re.compile(rf"^/pattern/{i}/(?P<tail>\w+)$"), _responder(f"pattern-{i}")
            )

        async with anyio.create_task_group() as tg:
            for i in range(N):
                tg.start_soon(anyio.to_thread.run_sync, register, i)

        assert len(router) == 2 * N

        results: dict[int, tuple[str, str]] = {}

        async def check(i: int) -> None:
            exact = await router.dispatch(Request(method="GET", path=f"/exact/{i}"))
            pattern = await router.dispatch(Request(method="POST", path=f"/pattern/{i}/x"))
            results[i] = (exact.text, pattern.text)

        async with anyio.create_task_group() as tg:
            for i in range(N):
                tg.start_soon(check, i)

        assert results == {i: (f"exact-{i}", f"pattern-{i}") for i in range(N)}

    def test_os_threads_resolve_while_registering(self) -> None:
        router = Router()
        router.register_exact("GET", "/stable", _responder("stable"))
        errors: list[str] = []
        start = threading.Barrier(2 * N, timeout=10)

        def register(i: int) -> None:
            start.wait()
            router.register_exact("GET", f"/r/{i}", _responder(str(i)))

        def resolve() -> None:
            start.wait()
            for _ in range(100):
                handler, params = router.resolve("GET", "/stable")
                if params is not None:
                    errors.append("unexpected params")

        threads = [threading.Thread(target=register, args=(i,)) for i in range(N)]
        threads += [threading.Thread(target=resolve) for _ in range(N)]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)

        assert errors == []
        assert len(router) == N + 1
        for i in range(N):
            handler, _ = router.resolve("GET", f"/r/{i}")
            assert handler is not router.resolve("GET", "/missing")[0]

    async def test_params_do_not_leak_between_requests(self) -> None:
        router = Router()

        async def echo(request: Request) -> Response:
            await anyio.sleep(0)
            return Response(get_params(request)["id"])

        router.register_pattern("GET", re.compile(r"^/echo/(?P<id>\d+)$"), echo)

        results: dict[int, str] = {}

        async def call(i: int) -> None:
            response = await router.dispatch(Request(method="GET", path=f"/echo/{i}"))
            results[i] = response.text

        async with anyio.create_task_group() as tg:
            for i in range(N):
                tg.start_soon(call, i)

        assert results == {i: str(i) for i in range(N)}
