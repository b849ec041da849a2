import json
import os

import pytest

from renovator.constants import CONFIG_TEMPLATE, ENV_TEMPLATE
from renovator.errors import RenovatorError
from renovator.services.filesystem import FileSystemService


class DummyLogger:
    def info(self, *_args, **_kwargs):
        return None

    def debug(self, *_args, **_kwargs):
        return None


class DummyConsole:
    def print(self, *_args, **_kwargs):
        return None


def _service() -> FileSystemService:
    return FileSystemService(logger=DummyLogger(), console=DummyConsole())


def test_ensure_config_file_creates_parents_and_template(tmp_path):
    target = tmp_path / "configs" / "team" / "renovate.json"

    resolved = _service().ensure_config_file(str(target))

    assert resolved == os.path.realpath(target)
    assert os.path.isabs(resolved)
    assert target.read_text(encoding="utf-8") == CONFIG_TEMPLATE
    assert json.loads(CONFIG_TEMPLATE) == {
        "onboarding": True,
        "prFooter": "This PR generated by Renovate orchestrated by Renovator.",
    }


def test_ensure_config_file_is_idempotent(tmp_path):
    target = tmp_path / "renovate.json"
    service = _service()

    first = service.ensure_config_file(str(target))
    target.write_text('{"extends": ["config:recommended"]}\n', encoding="utf-8")
    second = service.ensure_config_file(str(target))

    assert first == second
    assert target.read_text(encoding="utf-8") == '{"extends": ["config:recommended"]}\n'


def test_ensure_config_file_resolves_relative_path(tmp_path, monkeypatch):
    monkeypatch.chdir(tmp_path)

    resolved = _service().ensure_config_file("renovate.json")

    assert resolved == os.path.realpath(tmp_path / "renovate.json")


def test_ensure_env_file_writes_only_comments(tmp_path):
    target = tmp_path / "secrets" / "renovate.env"

    resolved = _service().ensure_env_file(str(target))

    assert resolved == os.path.realpath(target)
    content = target.read_text(encoding="utf-8")
    assert content == ENV_TEMPLATE
    lines = content.splitlines()
    assert len(lines) == 3
    assert all(line.startswith("#") for line in lines)


def test_ensure_file_requires_a_path():
    with pytest.raises(RenovatorError, match="No env file was passed"):
        _service().ensure_env_file("")


def test_ensure_file_rejects_directory(tmp_path):
    with pytest.raises(RenovatorError, match="is a directory"):
        _service().ensure_config_file(str(tmp_path))


def test_ensure_file_wraps_filesystem_errors(tmp_path):
    blocker = tmp_path / "blocker"
    blocker.write_text("not a directory", encoding="utf-8")

    with pytest.raises(RenovatorError, match="Could not create config file"):
        _service().ensure_config_file(str(blocker / "renovate.json"))
