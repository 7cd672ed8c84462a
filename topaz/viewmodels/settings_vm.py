from __future__ import annotations

from dataclasses import asdict, dataclass, replace
import os
from typing import Any, Mapping

from ..utils.logging import env_requests_debug


@dataclass
class SettingsConfig:
    """Typed runtime settings that persist via StorageLocal."""

    last_directory: str = ""
    window_geometry: str = "960x720"


def _default_debug_logging() -> bool:
    return env_requests_debug()


class SettingsVM:
    """Keeps app settings state and validation, no I/O here."""

    def __init__(self, *, config: SettingsConfig | None = None) -> None:
        self.config = config or SettingsConfig()
        self.debug_logging: bool = _default_debug_logging()

    # ------------------------------------------------------------------
    # Properties bridging to the typed config
    # ------------------------------------------------------------------
    @property
    def last_directory(self) -> str:
        return self.config.last_directory

    @last_directory.setter
    def last_directory(self, value: str) -> None:
        self.config = replace(self.config, last_directory=self._coerce_dir(value))

    @property
    def window_geometry(self) -> str:
        return self.config.window_geometry

    @window_geometry.setter
    def window_geometry(self, value: str) -> None:
        self.config = replace(self.config, window_geometry=self._coerce_geometry(value))

    # ------------------------------------------------------------------
    def apply_dict(self, payload: Mapping[str, Any]) -> None:
        """Apply persisted settings to the view-model."""

        if not isinstance(payload, Mapping):
            raise ValueError("Settings payload must be a mapping of flat keys.")

        allowed_keys = {*SettingsConfig.__annotations__.keys(), "debug_logging"}
        unknown = set(payload.keys()) - allowed_keys
        if unknown:
            raise ValueError(f"Unsupported settings keys: {', '.join(sorted(str(key) for key in unknown))}")

        if "last_directory" in payload:
            self.last_directory = payload["last_directory"]
        if "window_geometry" in payload:
            self.window_geometry = payload["window_geometry"]
        if "debug_logging" in payload:
            self.debug_logging = self._coerce_bool(payload["debug_logging"])

    def to_dict(self) -> dict:
        snapshot = asdict(self.config)
        snapshot["debug_logging"] = bool(self.debug_logging)
        return snapshot

    # ------------------------------------------------------------------
    # Coercion helpers
    # ------------------------------------------------------------------
    @staticmethod
    def _coerce_dir(value: Any) -> str:
        if value is None:
            return ""
        text = os.fspath(value) if isinstance(value, os.PathLike) else str(value)
        return text.strip()

    @staticmethod
    def _coerce_geometry(value: Any) -> str:
        text = str(value or "").strip()
        if not text:
            return SettingsConfig.window_geometry
        size = text.split("+", 1)[0]
        width, sep, height = size.partition("x")
        if not sep or not width.isdigit() or not height.isdigit():
            raise ValueError(f"window_geometry must look like WIDTHxHEIGHT, got {text!r}")
        return text

    @staticmethod
    def _coerce_bool(value: Any) -> bool:
        if isinstance(value, str):
            return value.strip().lower() in {"1", "true", "yes", "on"}
        return bool(value)
