"""
Client-side key/value storage.

The session token and the liked-recipes list live on the client, the way a
browser keeps them in local storage. Each owner (session state, liked-set) is
handed a storage object explicitly; there is no module-level store.

Two implementations:
- MemoryStorage: wraps any mutable mapping. Passing st.session_state keeps
  values for the lifetime of one Streamlit browser session.
- JsonFileStorage: a JSON object on disk, so values survive restarts. The
  file belongs to the server process, so each client gets its own key prefix.

Values are strings, like local storage. Callers that need structure encode it
themselves (see recipebook.likes).
"""

import json
import logging
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Dict, MutableMapping, Optional, Union

logger = logging.getLogger(__name__)

STORAGE_SESSION = "session"
STORAGE_FILE = "file"


class ClientStorage(ABC):
    """Minimal local-storage style interface."""

    @abstractmethod
    def get_item(self, key: str) -> Optional[str]:
        """Return the stored string for key, or None if absent."""

    @abstractmethod
    def set_item(self, key: str, value: str) -> None:
        """Store value under key, replacing any previous value."""

    @abstractmethod
    def remove_item(self, key: str) -> None:
        """Remove key. Removing an absent key is not an error."""


class MemoryStorage(ClientStorage):
    """Storage backed by a mutable mapping (a dict or st.session_state)."""

    def __init__(self, mapping: Optional[MutableMapping] = None, prefix: str = ""):
        self._mapping = mapping if mapping is not None else {}
        self._prefix = prefix

    def get_item(self, key: str) -> Optional[str]:
        return self._mapping.get(self._prefix + key)

    def set_item(self, key: str, value: str) -> None:
        self._mapping[self._prefix + key] = str(value)

    def remove_item(self, key: str) -> None:
        self._mapping.pop(self._prefix + key, None)


class JsonFileStorage(ClientStorage):
    """
    Storage persisted as a single JSON object in a file.

    The file is read on every access so two app processes pointing at the same
    file see each other's writes. A missing or unreadable file reads as empty.
    Keys are stored as "<prefix><key>"; clients sharing a file must use
    different prefixes.
    """

    def __init__(self, path: Union[str, Path], prefix: str = ""):
        self.path = Path(path)
        self._prefix = prefix

    def _read(self) -> Dict[str, str]:
        if not self.path.exists():
            return {}
        try:
            data = json.loads(self.path.read_text(encoding="utf-8") or "{}")
        except (OSError, ValueError) as exc:
            logger.warning("Could not read client state from %s: %s", self.path, exc)
            return {}
        if not isinstance(data, dict):
            logger.warning("Client state in %s is not a JSON object, ignoring it", self.path)
            return {}
        return data

    def _write(self, data: Dict[str, str]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        tmp_path = self.path.with_name(self.path.name + ".tmp")
        tmp_path.write_text(json.dumps(data, ensure_ascii=False, indent=2), encoding="utf-8")
        tmp_path.replace(self.path)

    def get_item(self, key: str) -> Optional[str]:
        return self._read().get(self._prefix + key)

    def set_item(self, key: str, value: str) -> None:
        data = self._read()
        data[self._prefix + key] = str(value)
        self._write(data)

    def remove_item(self, key: str) -> None:
        data = self._read()
        if self._prefix + key in data:
            del data[self._prefix + key]
            self._write(data)


def open_client_storage(
    backend: str,
    session_mapping: MutableMapping,
    state_file: Union[str, Path],
    client_id: str,
) -> ClientStorage:
    """
    Build the storage for one client.

    Args:
        backend: STORAGE_SESSION or STORAGE_FILE. Anything else is treated
            as STORAGE_SESSION.
        session_mapping: Per-client mapping (st.session_state in the app)
        state_file: Shared JSON file for the file backend
        client_id: Identifier of this client, used to partition the file

    Returns:
        MemoryStorage over session_mapping, or a JsonFileStorage whose keys
        are prefixed with client_id.
    """
    if backend == STORAGE_FILE:
        if not client_id:
            raise ValueError("File-backed client storage needs a client id")
        return JsonFileStorage(state_file, prefix=f"{client_id}:")
    return MemoryStorage(session_mapping, prefix="client:")
