from __future__ import annotations

from pathlib import Path

LOG_FORMAT = "%(asctime)s %(levelname)s %(name)s: %(message)s"


def get_config_paths() -> dict[str, Path]:
    """Return canonical on-disk locations for bundled data files."""

    package_root = Path(__file__).resolve().parents[1]
    data_dir = package_root / "data"

    return {
        "data_dir": data_dir,
        "sample_records": data_dir / "sample_words.json",
    }
