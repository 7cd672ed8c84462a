from __future__ import annotations
import json, logging, os
from typing import Dict, Optional
from topaz.domain.ports import StoragePort

CONFIG_DIR_ENV = "TOPAZ_CONFIG_DIR"
_SETTINGS_FILE = "user_settings.json"


def default_config_dir() -> str:
    """Return the settings directory (``$TOPAZ_CONFIG_DIR`` or ``~/.topaz``)."""
    override = os.getenv(CONFIG_DIR_ENV)
    if override and override.strip():
        return os.path.expanduser(override.strip())
    return os.path.join(os.path.expanduser("~"), ".topaz")


class StorageLocal(StoragePort):
    """Local filesystem storage for user settings (JSON)."""

    def __init__(self, root_dir: Optional[str] = None) -> None:
        self.root = root_dir or default_config_dir()
        self._log = logging.getLogger(__name__)

    @property
    def settings_path(self) -> str:
        return os.path.join(self.root, _SETTINGS_FILE)

    def save_user_settings(self, payload: Dict) -> None:
        os.makedirs(self.root, exist_ok=True)
        with open(self.settings_path, "w", encoding="utf-8") as f:
            json.dump(payload, f, ensure_ascii=False, indent=2)

    def load_user_settings(self) -> Optional[Dict]:
        path = self.settings_path
        if not os.path.exists(path):
            return None
        try:
            with open(path, "r", encoding="utf-8") as f:
                data = json.load(f)
        except (OSError, ValueError) as exc:
            self._log.warning("Ignoring unreadable settings file %s: %s", path, exc)
            return None
        if not isinstance(data, dict):
            self._log.warning("Ignoring settings file %s: expected a JSON object", path)
            return None
        return data
