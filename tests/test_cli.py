"""Tests for remux.cli: argument parsing, ``routes`` and ``run``."""

import sys
import textwrap
import types
from pathlib import Path

import pytest

from remux.cli import main
from remux.cli._routes import load_router
from remux.errors import ConfigurationError
from remux.routing.router import Router

APP_SOURCE = textwrap.dedent(
    """
    import re

    from remux import Response, Router, recoverer

    router = Router()


    @router.route("GET", "/test")
    async def exact(request):
        return Response("exact")


    @router.route("GET", re.compile(r"^/test/(?P<id>\\d+)$"), recoverer)
    async def by_id(request):
        return Response("pattern")


    def make_router():
        return Router()


    def make_number():
        return 42


    def make_broken():
        raise RuntimeError("boom")


    not_a_router = 42
    """
)


@pytest.fixture
def app_module(tmp_path: Path, monkeypatch: pytest.MonkeyPatch) -> str:
    name = f"cli_app_{tmp_path.name}"
    (tmp_path / f"{name}.py").write_text(APP_SOURCE)
    monkeypatch.syspath_prepend(str(tmp_path))
    yield name
    sys.modules.pop(name, None)


class TestCLIHelp:
    def test_help_exits_zero(self) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["--help"])
        assert exc_info.value.code == 0

    def test_no_command_prints_help(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([])
        assert exc_info.value.code == 0
        assert "remux" in capsys.readouterr().out

    @pytest.mark.parametrize("command", ["run", "routes"])
    def test_missing_app(self, command: str) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main([command])
        assert exc_info.value.code == 2


class TestLoadRouter:
    def test_attribute(self, app_module: str) -> None:
        assert isinstance(load_router(f"{app_module}:router"), Router)

    def test_default_attribute(self, app_module: str) -> None:
        assert load_router(app_module) is load_router(f"{app_module}:router")

    def test_factory(self, app_module: str) -> None:
        router = load_router(f"{app_module}:make_router")
        assert isinstance(router, Router)
        assert len(router) == 0

    def test_factory_must_return_router(self, app_module: str) -> None:
        with pytest.raises(ConfigurationError, match="returned int, expected a remux.Router"):
            load_router(f"{app_module}:make_number")

    def test_factory_error(self, app_module: str) -> None:
        with pytest.raises(ConfigurationError, match="factory .* failed: boom") as exc_info:
            load_router(f"{app_module}:make_broken")
        assert isinstance(exc_info.value.__cause__, RuntimeError)

    def test_not_callable(self, app_module: str) -> None:
        with pytest.raises(ConfigurationError, match="resolved to int"):
            load_router(f"{app_module}:not_a_router")

    def test_missing_attribute(self, app_module: str) -> None:
        with pytest.raises(ConfigurationError, match="no attribute 'nope'"):
            load_router(f"{app_module}:nope")

    def test_missing_module(self) -> None:
        with pytest.raises(ConfigurationError, match="cannot import"):
            load_router("no_such_module_for_remux:router")


class TestRoutesCommand:
    def test_lists_routes(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", f"{app_module}:router"])
        out = capsys.readouterr().out
        lines = out.splitlines()
        assert lines[0].split() == ["METHOD", "PATH", "KIND", "HANDLER"]
        assert lines[2].split() == ["GET", "/test", "exact", "exact"]
        assert lines[3].split() == ["GET", r"^/test/(?P<id>\d+)$", "pattern", "recover"]

    def test_empty(self, app_module: str, capsys: pytest.CaptureFixture[str]) -> None:
        main(["routes", f"{app_module}:make_router"])
        assert "No routes registered." in capsys.readouterr().out

    def test_bad_import(self, capsys: pytest.CaptureFixture[str]) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["routes", "no_such_module_for_remux:router"])
        assert exc_info.value.code == 1
        assert "Error:" in capsys.readouterr().err


class TestRunCommand:
    @pytest.fixture
    def served(self, monkeypatch: pytest.MonkeyPatch) -> dict:
        calls: dict = {}

        def run(app, **kwargs) -> None:
            calls["app"] = app
            calls.update(kwargs)

        monkeypatch.setitem(sys.modules, "uvicorn", types.SimpleNamespace(run=run))
        monkeypatch.delenv("HOST", raising=False)
        monkeypatch.delenv("PORT", raising=False)
        monkeypatch.delenv("LOG_LEVEL", raising=False)
        return calls

    def test_defaults(self, app_module: str, served: dict) -> None:
        main(["run", f"{app_module}:router"])
        assert isinstance(served["app"], Router)
        assert served["host"] == "0.0.0.0"
        assert served["port"] == 9999
        assert served["log_level"] == "info"

    def test_environment(
        self, app_module: str, served: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("HOST", "127.0.0.1")
        monkeypatch.setenv("PORT", "8080")
        main(["run", f"{app_module}:router"])
        assert served["host"] == "127.0.0.1"
        assert served["port"] == 8080

    def test_flags_override_environment(
        self, app_module: str, served: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PORT", "8080")
        main(["run", f"{app_module}:router", "--host", "::1", "--port", "7000"])
        assert served["host"] == "::1"
        assert served["port"] == 7000

    def test_bad_port_environment(
        self, app_module: str, served: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("PORT", "http")
        with pytest.raises(SystemExit) as exc_info:
            main(["run", f"{app_module}:router"])
        assert exc_info.value.code == 1
        assert served == {}

    def test_bad_log_level_environment(
        self, app_module: str, served: dict, monkeypatch: pytest.MonkeyPatch
    ) -> None:
        monkeypatch.setenv("LOG_LEVEL", "trace")
        with pytest.raises(SystemExit) as exc_info:
            main(["run", f"{app_module}:router"])
        assert exc_info.value.code == 1
        assert served == {}

    def test_factory_returning_other_type(
        self, app_module: str, served: dict, capsys: pytest.CaptureFixture[str]
    ) -> None:
        with pytest.raises(SystemExit) as exc_info:
            main(["run", f"{app_module}:make_number"])
        assert exc_info.value.code == 1
        assert "expected a remux.Router" in capsys.readouterr().err
        assert served == {}
