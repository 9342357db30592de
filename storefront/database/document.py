"""Whole-document JSON storage.

Every read parses the entire file and every write replaces it. There is no
locking: concurrent writers race and the last one wins.
"""

import copy
import json
import logging
import os
import stat
import tempfile
from typing import Any, Callable, Optional

from ..core.errors import StorageError

logger = logging.getLogger(__name__)


class JsonDocument:
    """A JSON file read and written as a single value"""

    def __init__(self, path: str, default: Optional[Callable[[], Any]] = None):
        """
        Args:
            path: Location of the JSON file
            default: Factory for the value of a missing file. When None a
                missing file is a StorageError.
        """
        self.path = path
        self._default = default

    def read(self) -> Any:
        """Load and return the whole document"""
        if not os.path.exists(self.path):
            if self._default is None:
                raise StorageError(f"Document not found: {self.path}", self.path)
            return copy.deepcopy(self._default())

        try:
            with open(self.path, "r", encoding="utf-8") as f:
                return json.load(f)
        except (OSError, ValueError) as e:
            logger.error(f"Failed to read {self.path}: {e}")
            raise StorageError(f"Unable to read document: {self.path}", self.path) from e

    def write(self, data: Any) -> None:
        """Replace the whole document.

        The data goes to a temp file in the same directory first and is then
        moved over the target, so readers never see a partial file. An
        existing target keeps its permission bits; a newly created document
        gets the owner-only mode of the temp file.
        """
        directory = os.path.dirname(os.path.abspath(self.path))
        try:
            os.makedirs(directory, exist_ok=True)
            fd, tmp_path = tempfile.mkstemp(dir=directory, prefix=".tmp-", suffix=".json")
            try:
                with os.fdopen(fd, "w", encoding="utf-8") as f:
                    json.dump(data, f, indent=2)
                if os.path.exists(self.path):
                    os.chmod(tmp_path, stat.S_IMODE(os.stat(self.path).st_mode))
                os.replace(tmp_path, self.path)
            except BaseException:
                if os.path.exists(tmp_path):
                    os.unlink(tmp_path)
                raise
        except OSError as e:
            logger.error(f"Failed to write {self.path}: {e}")
            raise StorageError(f"Unable to write document: {self.path}", self.path) from e


def empty_database() -> dict:
    """Contents of a fresh user/cart database"""
    return {"users": [], "carts": {}}


def open_database(path: str) -> JsonDocument:
    """User/cart database document, created empty on first write"""
    return JsonDocument(path, default=empty_database)
