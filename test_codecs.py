"""JsonCodec and settings-driven construction."""

import importlib
import os

import pytest
from pydantic import ValidationError

import filestore.config
from filestore import FileStore, JsonCodec, Settings, get_settings


def test_json_codec_any_round_trip():
    codec = JsonCodec()
    value = {"a": [1, 2.5, None, True], "b": "text"}
    assert codec.decode(codec.encode(value)) == value


def test_json_codec_indent():
    assert JsonCodec(indent=2).encode({"a": 1}) == b'{\n  "a": 1\n}'


def test_json_codec_rejects_wrong_shape():
    with pytest.raises(ValidationError):
        JsonCodec(int).decode(b'{"a": 1}')


def test_json_codec_rejects_truncated_input():
    with pytest.raises(ValidationError):
        JsonCodec(list[int]).decode(b"[1, 2")


def test_json_codec_repr():
    assert repr(JsonCodec(int)) == "JsonCodec(int)"


# ── Settings ───────────────────────────────────────────────────────────

def test_settings_defaults(monkeypatch):
    for name in ("FILESTORE_DATA_DIR", "FILESTORE_ATOMIC_WRITES", "FILESTORE_JSON_INDENT"):
        monkeypatch.delenv(name, raising=False)
    s = Settings()
    assert str(s.FILESTORE_DATA_DIR) == "data"
    assert s.FILESTORE_ATOMIC_WRITES is False
    assert s.FILESTORE_JSON_INDENT is None


def test_settings_from_env(monkeypatch, tmp_path):
    monkeypatch.setenv("FILESTORE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FILESTORE_ATOMIC_WRITES", "Yes")
    monkeypatch.setenv("FILESTORE_JSON_INDENT", "2")
    s = Settings()
    assert s.FILESTORE_DATA_DIR == tmp_path
    assert s.FILESTORE_ATOMIC_WRITES is True
    assert s.FILESTORE_JSON_INDENT == 2


def test_settings_invalid_indent_falls_back(monkeypatch):
    monkeypatch.setenv("FILESTORE_JSON_INDENT", "wide")
    assert Settings().FILESTORE_JSON_INDENT is None


def test_store_from_settings(monkeypatch, tmp_path):
    monkeypatch.setenv("FILESTORE_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("FILESTORE_ATOMIC_WRITES", "1")
    monkeypatch.setenv("FILESTORE_JSON_INDENT", "2")
    s = FileStore.from_settings()
    assert s.directory == tmp_path
    assert s.atomic_writes is True

    s.store("cfg", {"a": 1})
    assert (tmp_path / "cfg").read_text(encoding="utf-8") == '{\n  "a": 1\n}'
    assert s.load("cfg") == {"a": 1}


def test_dotenv_is_loaded_only_by_get_settings(monkeypatch, tmp_path):
    (tmp_path / ".env").write_text("FILESTORE_JSON_INDENT=4\n", encoding="utf-8")
    monkeypatch.chdir(tmp_path)
    # record the variable so monkeypatch restores it after load_dotenv sets it
    monkeypatch.setenv("FILESTORE_JSON_INDENT", "")
    monkeypatch.delenv("FILESTORE_JSON_INDENT")

    importlib.reload(filestore.config)
    assert "FILESTORE_JSON_INDENT" not in os.environ
    assert Settings().FILESTORE_JSON_INDENT is None

    assert get_settings().FILESTORE_JSON_INDENT == 4
