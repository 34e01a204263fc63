"""
Text-file record store: the roster persisted as field-prefix record blocks.

Usage:
    from roster.store.text_file import TextFileRecordStore

    store = TextFileRecordStore("data/employee.txt")
    store.add(1, "Ann", "Eng", 50000.0)
    result = store.load_all()
    if result.ok:
        print(result.records)

Every mutation rewrites the whole file. With `atomic_writes` enabled the new
content goes to a temporary file in the same directory and is moved over the
target with `os.replace`, so a failed write leaves the previous roster intact.
"""

from __future__ import annotations

import codecs
import contextlib
import os
import shutil
import stat
import tempfile
from pathlib import Path
from typing import Iterable, List, Optional, Union

from roster.config import MalformedPolicy, Settings, get_settings
from roster.domain.models import Employee
from roster.exceptions import RecordParseError
from roster.store.abstract import AbstractRecordStore
from roster.store.codec import RecordDecoder, encode_records
from roster.store.results import LoadResult, SaveResult, StoreErrorKind, StoreFailure
from roster.utils.logging import get_logger

log = get_logger(__name__)

_DEFAULT_FILE_MODE = stat.S_IRUSR | stat.S_IWUSR | stat.S_IRGRP | stat.S_IWGRP | stat.S_IROTH | stat.S_IWOTH


def _current_umask() -> int:
    mask = os.umask(0)
    os.umask(mask)
    return mask


class TextFileRecordStore(AbstractRecordStore):
    """
    Record store backed by a single line-oriented text file.

    The file is exclusively owned by one running instance; nothing guards
    against concurrent writers (last writer wins).
    """

    def __init__(
        self,
        path: Union[str, Path],
        *,
        atomic_writes: bool = True,
        on_malformed: MalformedPolicy = MalformedPolicy.SKIP,
        encoding: str = "utf-8",
        drop_malformed: bool = False,
    ) -> None:
        codecs.lookup(encoding)
        self._path = Path(path).expanduser()
        self._atomic_writes = atomic_writes
        self._on_malformed = MalformedPolicy(on_malformed)
        self._encoding = encoding
        self.drop_malformed = drop_malformed

    @classmethod
    def from_settings(cls, settings: Optional[Settings] = None) -> "TextFileRecordStore":
        """Build a store from configuration (defaults to the cached settings)."""
        settings = settings or get_settings()
        return cls(
            settings.data_file,
            atomic_writes=settings.atomic_writes,
            on_malformed=settings.on_malformed,
            encoding=settings.encoding,
            drop_malformed=settings.drop_malformed,
        )

    @property
    def path(self) -> Path:
        return self._path

    def __repr__(self) -> str:
        return f"{type(self).__name__}(path={str(self._path)!r})"

    # ── Primitives ────────────────────────────────────────────────────────

    def load_all(self) -> LoadResult:
        """
        Read all employees from the backing file.

        A missing or empty file is an empty roster, not an error.
        """
        decoder = RecordDecoder(self._on_malformed)
        records: List[Employee] = []
        line_no = 0
        try:
            with self._path.open("r", encoding=self._encoding) as fh:
                for line_no, line in enumerate(fh, start=1):
                    employee = decoder.feed(line_no, line)
                    if employee is not None:
                        records.append(employee)
            decoder.finish(line_no)
        except FileNotFoundError:
            log.debug("Roster file does not exist yet", extra={"path": str(self._path)})
            return LoadResult()
        except RecordParseError as exc:
            log.error(
                f"Malformed roster file {self._path}: {exc}",
                extra={"path": str(self._path), "line_no": exc.line_no},
            )
            return LoadResult(
                error=StoreFailure(StoreErrorKind.PARSE, exc.reason, line_no=exc.line_no),
            )
        except (OSError, UnicodeDecodeError) as exc:
            log.error(
                f"Failed reading roster file {self._path} after line {line_no}: {exc}",
                extra={"path": str(self._path), "records": len(records)},
            )
            return LoadResult(
                records=tuple(records),
                error=StoreFailure(StoreErrorKind.READ, str(exc), line_no=line_no or None),
                skipped=decoder.skipped,
            )

        if decoder.skipped:
            consequence = (
                "they will be discarded on the next write"
                if self.drop_malformed
                else "changes are refused until they are repaired"
            )
            log.warning(
                f"Skipped {decoder.skipped} malformed record block(s) from {self._path}; {consequence}",
                extra={"path": str(self._path), "skipped": decoder.skipped},
            )
        log.debug(
            f"Loaded {len(records)} employee(s)",
            extra={"path": str(self._path), "records": len(records)},
        )
        return LoadResult(records=tuple(records), skipped=decoder.skipped)

    def save_all(self, records: Iterable[Employee]) -> SaveResult:
        """
        Replace the backing file's content with `records`, in order.
        """
        records = list(records)
        content = encode_records(records)
        try:
            self._path.parent.mkdir(parents=True, exist_ok=True)
            if self._atomic_writes:
                self._replace_atomically(content)
            else:
                with self._path.open("w", encoding=self._encoding) as fh:
                    fh.write(content)
        except (OSError, UnicodeEncodeError) as exc:
            log.error(
                f"Failed writing roster file {self._path}: {exc}",
                extra={"path": str(self._path), "records": len(records)},
            )
            return SaveResult(error=StoreFailure(StoreErrorKind.WRITE, str(exc)))

        log.debug(
            f"Saved {len(records)} employee(s)",
            extra={"path": str(self._path), "records": len(records)},
        )
        return SaveResult(records_written=len(records))

    def _replace_atomically(self, content: str) -> None:
        fd, tmp_name = tempfile.mkstemp(
            prefix=f".{self._path.name}.", suffix=".tmp", dir=self._path.parent
        )
        try:
            try:
                fh = os.fdopen(fd, "w", encoding=self._encoding)
            except BaseException:
                os.close(fd)
                raise
            with fh:
                fh.write(content)
            self._apply_target_mode(tmp_name)
            os.replace(tmp_name, self._path)
        except BaseException:
            with contextlib.suppress(FileNotFoundError):
                os.unlink(tmp_name)
            raise

    def _apply_target_mode(self, tmp_name: str) -> None:
        # mkstemp creates 0600; keep the roster's mode, or the umask default for a new file.
        if self._path.exists():
            shutil.copymode(self._path, tmp_name)
        else:
            os.chmod(tmp_name, _DEFAULT_FILE_MODE & ~_current_umask())


__all__ = ["TextFileRecordStore"]
