"""Payload file loading for the CLI and tests."""

from __future__ import annotations

from pathlib import Path
from typing import Any

import yaml

from a2a_wire.errors import PayloadLoadError


class PayloadLoader:
    """Read a JSON or YAML payload file into plain Python data."""

    def __init__(self, path: Path | str) -> None:
        self._path = Path(path)

    @property
    def path(self) -> Path:
        return self._path

    def load(self) -> Any:
        """Read and parse the file.

        JSON is parsed by the YAML loader as well.  Unlike configuration
        files, payloads are data: ``$VAR`` text is not expanded.

        Raises:
            PayloadLoadError: If the file cannot be read, cannot be parsed,
                or is empty.
        """
        try:
            raw = self._path.read_text(encoding="utf-8")
        except OSError as exc:
            raise PayloadLoadError(str(self._path), str(exc)) from exc

        try:
            data: Any = yaml.safe_load(raw)
        except yaml.YAMLError as exc:
            raise PayloadLoadError(str(self._path), f"parse error: {exc}") from exc

        if data is None:
            raise PayloadLoadError(str(self._path), "file is empty")
        return data
