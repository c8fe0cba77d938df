"""
On-device session storage for the API client.

The mobile app keeps the bearer token in a key/value store under one fixed
key; this is the same contract backed by a small JSON file. A missing key
means the user is logged out.
"""
# Standard library imports
import json
import logging
import os
from pathlib import Path
from typing import Dict, Optional, Union

# Local application imports
from ..core.config import get_settings

logger = logging.getLogger(__name__)

AUTH_TOKEN_KEY = "authToken"


class TokenStore:
    """Persistent key/value file holding the current session token"""

    def __init__(self, path: Optional[Union[str, Path]] = None) -> None:
        self.path = Path(path or get_settings().session_file)

    def get_token(self) -> Optional[str]:
        token = self._read().get(AUTH_TOKEN_KEY)
        return token or None

    def set_token(self, token: str) -> None:
        if not token:
            raise ValueError("Token cannot be empty")
        data = self._read()
        data[AUTH_TOKEN_KEY] = token
        self._write(data)

    def clear(self) -> None:
        data = self._read()
        if data.pop(AUTH_TOKEN_KEY, None) is not None:
            self._write(data)

    def is_logged_in(self) -> bool:
        return self.get_token() is not None

    def _read(self) -> Dict[str, str]:
        try:
            with self.path.open("r", encoding="utf-8") as handle:
                data = json.load(handle)
        except FileNotFoundError:
            return {}
        except (OSError, json.JSONDecodeError) as e:
            logger.warning(f"Ignoring unreadable session file {self.path}: {e}")
            return {}
        return data if isinstance(data, dict) else {}

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_suffix(self.path.suffix + ".tmp")
        with tmp_path.open("w", encoding="utf-8") as handle:
            json.dump(data, handle)
        os.chmod(tmp_path, 0o600)
        os.replace(tmp_path, self.path)
