"""Startup sequence tests: fail fast on broken templates and serve failures."""

from pathlib import Path

import pytest

from htmx_prototype import main
from htmx_prototype.config import Settings


class _RecordingServer:
    instances: list["_RecordingServer"] = []
    error: BaseException | None = None

    def __init__(self, config) -> None:
        self.config = config
        self.ran = False
        _RecordingServer.instances.append(self)

    def run(self) -> None:
        self.ran = True
        if _RecordingServer.error is not None:
            raise _RecordingServer.error


@pytest.fixture()
def recording_server(monkeypatch: pytest.MonkeyPatch) -> type[_RecordingServer]:
    _RecordingServer.instances = []
    _RecordingServer.error = None
    monkeypatch.setattr(main.uvicorn, "Server", _RecordingServer)
    return _RecordingServer


def _broken_templates(tmp_path: Path) -> Path:
    (tmp_path / "counter").mkdir()
    (tmp_path / "index.html").write_text("<html>{% block %}</html>", encoding="utf-8")
    (tmp_path / "counter" / "_count.html").write_text("<p>Count: {{ count }}</p>", encoding="utf-8")
    return tmp_path


def test_broken_template_exits_before_listening(tmp_path: Path, recording_server) -> None:
    settings = Settings(templates_dir=_broken_templates(tmp_path))

    with pytest.raises(SystemExit) as excinfo:
        main.run(settings)

    assert excinfo.value.code == 1
    assert recording_server.instances == []


def test_create_app_surfaces_broken_template(tmp_path: Path) -> None:
    settings = Settings(templates_dir=_broken_templates(tmp_path))

    with pytest.raises(main.TemplateParseError):
        main.create_app(settings)


def test_server_binds_fixed_address_with_header_limit(recording_server) -> None:
    main.run(Settings())

    (server,) = recording_server.instances
    assert server.ran
    config = server.config
    assert config.host == "127.0.0.1"
    assert config.port == 8888
    assert config.http == "h11"
    assert config.h11_max_incomplete_event_size == 1 << 20


def test_server_passes_keep_alive_and_shutdown_grace(recording_server) -> None:
    main.run(Settings(keep_alive_timeout_seconds=3, graceful_shutdown_timeout_seconds=7))

    (server,) = recording_server.instances
    assert server.config.timeout_keep_alive == 3
    assert server.config.timeout_graceful_shutdown == 7


def test_interrupt_after_shutdown_is_a_normal_exit(recording_server) -> None:
    recording_server.error = KeyboardInterrupt()

    assert main.run(Settings()) is None
    assert recording_server.instances[0].ran


def test_bind_failure_exits_non_zero(recording_server) -> None:
    recording_server.error = OSError(98, "Address already in use")

    with pytest.raises(SystemExit) as excinfo:
        main.run(Settings())

    assert excinfo.value.code == 1


def test_settings_ignore_environment(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("PORT", "9999")
    monkeypatch.setenv("HOST", "0.0.0.0")
    monkeypatch.setenv("HTMX_PROTOTYPE_PORT", "9999")
    monkeypatch.chdir(tmp_path)
    (tmp_path / ".env").write_text("PORT=9999\n", encoding="utf-8")

    settings = Settings()

    assert settings.port == 8888
    assert settings.host == "127.0.0.1"
