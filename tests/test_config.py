from pathlib import Path

import pytest

from ethereum_legacy_signer.config import (
    CHAIN_ID_LIMIT,
    CONFIG_ENV_VAR,
    DEFAULT_CONFIG,
    SignerConfig,
    load_config,
)


def test_defaults(monkeypatch: pytest.MonkeyPatch) -> None:
    monkeypatch.delenv(CONFIG_ENV_VAR, raising=False)

    assert DEFAULT_CONFIG.max_chain_id == 110
    assert load_config() == SignerConfig()


def test_missing_file_uses_defaults(tmp_path: Path) -> None:
    assert load_config(tmp_path / "absent.yaml") == DEFAULT_CONFIG


def test_load_from_path(tmp_path: Path) -> None:
    path = tmp_path / "legacy_signer.yaml"
    path.write_text("max_chain_id: 1000\n")

    assert load_config(path).max_chain_id == 1000
    assert load_config(str(path)).max_chain_id == 1000


def test_empty_file_uses_defaults(tmp_path: Path) -> None:
    path = tmp_path / "legacy_signer.yaml"
    path.write_text("")

    assert load_config(path) == DEFAULT_CONFIG


def test_load_from_environment(
    tmp_path: Path, monkeypatch: pytest.MonkeyPatch
) -> None:
    path = tmp_path / "legacy_signer.yaml"
    path.write_text(f"max_chain_id: {CHAIN_ID_LIMIT}\n")
    monkeypatch.setenv(CONFIG_ENV_VAR, str(path))

    assert load_config().max_chain_id == CHAIN_ID_LIMIT


@pytest.mark.parametrize(
    "contents",
    [
        "max_chain_id: 0\n",
        "max_chain_id: -5\n",
        f"max_chain_id: {CHAIN_ID_LIMIT + 1}\n",
        "max_chain_id: lots\n",
        "- max_chain_id\n",
    ],
)
def test_invalid_config(tmp_path: Path, contents: str) -> None:
    path = tmp_path / "legacy_signer.yaml"
    path.write_text(contents)

    with pytest.raises(ValueError, match="Invalid configuration"):
        load_config(path)
