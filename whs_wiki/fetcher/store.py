"""Flat-file storage of downloaded and converted data."""

import json
import logging
import os
from pathlib import Path
from typing import Any

from ..constants import (
    DATA_FOLDER,
    DATA_LOG_FILE,
    WHS_ARTICLES_FILE,
    WHS_FILE,
    WHS_RAW_FILE,
)

data_logger = logging.getLogger("whs_wiki.data")


class DataStore:
    """On-disk layout of the data folder.

    Files are never invalidated: callers decide when to overwrite them.
    Folder creation, downloads and overwrites are recorded in an
    append-only log file inside the data folder.
    """

    def __init__(self, data_dir: str = DATA_FOLDER):
        """Initialize the store.

        Args:
            data_dir: Root data folder; "raw" and "wikimarkup" live inside it.
        """
        self.data_dir = Path(data_dir)
        self.raw_dir = self.data_dir / "raw"
        self.markup_dir = self.data_dir / "wikimarkup"
        self.log_file = self.data_dir / DATA_LOG_FILE
        self._log_handler = None

    @property
    def site_list_raw_path(self) -> Path:
        return self.raw_dir / WHS_RAW_FILE

    @property
    def site_list_path(self) -> Path:
        return self.data_dir / WHS_FILE

    @property
    def articles_path(self) -> Path:
        return self.data_dir / WHS_ARTICLES_FILE

    def markup_path(self, title: str) -> Path:
        """Path of the cached API response for an article.

        Args:
            title: Article title.

        Returns:
            "<markup folder>/<title>.json" with spaces replaced by underscores.
        """
        name = title.replace(" ", "_").replace("/", "%2F")
        return self.markup_dir / f"{name}.json"

    def create_folders(self) -> None:
        """Create the data folders that do not exist yet."""
        created = not self.data_dir.exists()
        self.data_dir.mkdir(parents=True, exist_ok=True)
        self._attach_log()
        if created:
            data_logger.info(f"Data folder '{self.data_dir}' created.")

        if not self.raw_dir.exists():
            self.raw_dir.mkdir()
            data_logger.info(f"Raw data folder '{self.raw_dir}' created.")
        if not self.markup_dir.exists():
            self.markup_dir.mkdir()
            data_logger.info(f"Wiki markup data folder '{self.markup_dir}' created.")

    def _attach_log(self) -> None:
        # One handler per log file, shared by every store pointing at it
        if self._log_handler is not None:
            return
        log_path = os.path.abspath(self.log_file)
        for handler in data_logger.handlers:
            if isinstance(handler, logging.FileHandler) and handler.baseFilename == log_path:
                self._log_handler = handler
                return

        handler = logging.FileHandler(log_path, mode="a", encoding="utf-8")
        handler.setFormatter(
            logging.Formatter("%(asctime)s %(levelname)s:%(name)s:%(message)s")
        )
        data_logger.addHandler(handler)
        # Data events go to the log file only
        data_logger.propagate = False
        if data_logger.level == logging.NOTSET or data_logger.level > logging.INFO:
            data_logger.setLevel(logging.INFO)
        self._log_handler = handler

    def close(self) -> None:
        """Detach and close the data log handler."""
        if self._log_handler is not None:
            data_logger.removeHandler(self._log_handler)
            self._log_handler.close()
            self._log_handler = None
            if not data_logger.handlers:
                data_logger.propagate = True

    @staticmethod
    def read_json(path: Path) -> Any:
        with open(path, "r", encoding="utf-8") as f:
            return json.load(f)

    @staticmethod
    def write_json(path: Path, data: Any) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(data, f, indent=2, ensure_ascii=False)

    @staticmethod
    def write_bytes(path: Path, data: bytes) -> None:
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "wb") as f:
            f.write(data)
