from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path


@dataclass(frozen=True)
class StorageConfig:
    data_dir: Path = Path("data")
    favorites_filename: str = "favorites.json"
    preferences_filename: str = "preferences.json"

    @property
    def favorites_path(self) -> Path:
        return self.data_dir / self.favorites_filename

    @property
    def preferences_path(self) -> Path:
        return self.data_dir / self.preferences_filename

    @classmethod
    def from_env(cls) -> StorageConfig:
        return cls(data_dir=Path(os.getenv("LUNCHPICK_DATA_DIR", "data")))


DEFAULT_STORAGE_CONFIG = StorageConfig()
