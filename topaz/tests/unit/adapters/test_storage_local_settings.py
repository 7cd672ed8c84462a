import json

from topaz.adapters.storage_local import StorageLocal, default_config_dir
from topaz.viewmodels.settings_vm import SettingsVM


def test_user_settings_round_trip(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path / "cfg"))
    payload = {"last_directory": "/data/notes", "window_geometry": "800x600", "debug_logging": True}

    storage.save_user_settings(payload)

    assert storage.load_user_settings() == payload


def test_missing_file_returns_none(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))

    assert storage.load_user_settings() is None
    assert not (tmp_path / "user_settings.json").exists()


def test_corrupt_or_non_object_file_is_ignored(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    settings_path = tmp_path / "user_settings.json"

    settings_path.write_text("{not json", encoding="utf-8")
    assert storage.load_user_settings() is None

    settings_path.write_text(json.dumps(["a", "b"]), encoding="utf-8")
    assert storage.load_user_settings() is None


def test_settings_vm_snapshot_persists(tmp_path):
    storage = StorageLocal(root_dir=str(tmp_path))
    vm = SettingsVM()
    vm.last_directory = str(tmp_path)

    storage.save_user_settings(vm.to_dict())

    with open(storage.settings_path, "r", encoding="utf-8") as fh:
        assert json.load(fh) == vm.to_dict()


def test_config_dir_env_override(monkeypatch, tmp_path):
    monkeypatch.setenv("TOPAZ_CONFIG_DIR", str(tmp_path))

    assert default_config_dir() == str(tmp_path)
    assert StorageLocal().root == str(tmp_path)
