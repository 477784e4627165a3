from __future__ import annotations

from pathlib import Path

import appdirs
import pytest

from cidfeed.config import ShellConfig, default_data_dir
from cidfeed.exceptions import CidfeedConfigError


def test_from_env_reads_variables(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CIDFEED_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("CIDFEED_NODE_STATE_FILE", "node.json")
    monkeypatch.setenv("CIDFEED_PERSIST", "off")

    config = ShellConfig.from_env()

    assert config.data_dir == tmp_path
    assert config.node_state_path == tmp_path / "node.json"
    assert config.security_state_file == "security-state.json"
    assert config.persist is False


def test_overrides_win_over_env(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("CIDFEED_DATA_DIR", "/somewhere/else")
    monkeypatch.setenv("CIDFEED_PERSIST", "0")

    config = ShellConfig.from_env(data_dir=tmp_path, persist=True)

    assert config.data_dir == tmp_path
    assert config.persist is True


def test_invalid_bool_falls_back_to_default(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.setenv("CIDFEED_PERSIST", "sometimes")
    assert ShellConfig.from_env().persist is True


def test_string_data_dir_is_coerced(tmp_path: Path) -> None:
    config = ShellConfig(data_dir=str(tmp_path))  # type: ignore[arg-type]
    assert config.security_state_path == tmp_path / "security-state.json"


@pytest.mark.parametrize("name", ["", "   ", "sub/node.json", "..\\node.json"])
def test_file_names_must_be_bare(name: str) -> None:
    with pytest.raises(CidfeedConfigError):
        ShellConfig(node_state_file=name)


def test_default_data_dir_uses_user_data_dir(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    monkeypatch.setenv("XDG_DATA_HOME", str(tmp_path))
    expected = Path(appdirs.user_data_dir("app.test", appauthor=False))
    assert default_data_dir("app.test") == expected


def test_default_data_dir_falls_back_to_cwd(monkeypatch: pytest.MonkeyPatch, tmp_path: Path) -> None:
    # An unresolvable home leaves appdirs with a relative "~" path.
    monkeypatch.setattr("cidfeed.config.appdirs.user_data_dir", lambda *_args, **_kwargs: "~/.local/share/app.test")
    monkeypatch.chdir(tmp_path)

    assert default_data_dir("app.test") == Path.cwd()
