from concurrent.futures import ThreadPoolExecutor
from concurrent.futures import TimeoutError as FuturesTimeoutError

from json_import.converter.exceptions import WriteTimeoutError
from json_import.logging.logger import Log
from json_import.vault.base import BaseVault
from json_import.vault.exceptions import DocumentWriteError, VaultError


class NoteWriter:
    """Replaces notes in the vault, one write at a time, with a timeout.

    Each write runs on a worker thread and the caller waits for it. A worker
    that times out is abandoned and the next write gets a fresh one.
    """

    def __init__(self, vault: BaseVault, timeout_seconds: float) -> None:
        self._vault = vault
        self._timeout_seconds = timeout_seconds
        self._executor = self._new_executor()

    def __enter__(self) -> "NoteWriter":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def overwrite(self, path: str, text: str) -> None:
        """Delete any note at path, then create it with text.

        Raises:
            VaultError: if the vault rejects the delete or create.
            WriteTimeoutError: if the write does not settle in time.
        """
        future = self._executor.submit(self._replace, path, text)
        try:
            future.result(timeout=self._timeout_seconds)
        except FuturesTimeoutError as exc:
            Log.error(f"Write of '{path}' still pending after {self._timeout_seconds}s")
            self._executor.shutdown(wait=False, cancel_futures=True)
            self._executor = self._new_executor()
            raise WriteTimeoutError(
                f"Writing '{path}' timed out after {self._timeout_seconds}s"
            ) from exc
        except VaultError:
            raise
        except Exception as exc:
            raise DocumentWriteError(f"Writing '{path}' failed: {exc}") from exc

    def close(self) -> None:
        self._executor.shutdown(wait=False, cancel_futures=True)

    def _replace(self, path: str, text: str) -> None:
        existing = self._vault.get_by_path(path)
        if existing is not None:
            self._vault.delete(existing)
            Log.debug(f"Deleted previous version of '{path}'")
        self._vault.create(path, text)

    @staticmethod
    def _new_executor() -> ThreadPoolExecutor:
        return ThreadPoolExecutor(max_workers=1, thread_name_prefix="note-writer")
