import csv
import io
import os
import shutil
import tempfile
from pathlib import Path
from typing import Iterable, List, Sequence, Union

from loguru import logger

import config
from core.errors import IoFailure

LINE_TERMINATOR = "\r\n"


def encode_row(fields: Sequence[str]) -> str:
    """Encodes one row as a CRLF-terminated comma separated line."""
    buf = io.StringIO()
    csv.writer(buf, lineterminator=LINE_TERMINATOR).writerow(fields)
    return buf.getvalue()


class RecordStore:
    """
    The roster file: an optional header line followed by one comma separated
    row per member.

    Every mutation rewrites or appends whole rows; nothing here locks the file,
    so two processes sharing one roster can overwrite each other's changes.
    """

    def __init__(self, path: Union[str, Path], header: str = config.CSV_HEADER):
        self.path = Path(path)
        self.header = header
        self._header_key = header.split(",", 1)[0]

    def __repr__(self) -> str:
        return f"RecordStore({str(self.path)!r})"

    # --- STATE CHECKS ---

    def exists(self) -> bool:
        return self.path.exists()

    def is_empty(self) -> bool:
        """True if the roster file is missing or has zero length."""
        try:
            return not self.path.exists() or self.path.stat().st_size == 0
        except OSError as e:
            raise IoFailure(f"Cannot stat {self.path}: {e}") from e

    def _is_header(self, row: Sequence[str]) -> bool:
        return bool(row) and row[0].strip() == self._header_key

    def _read_rows(self) -> List[List[str]]:
        if not self.path.exists():
            return []
        try:
            with open(self.path, "r", encoding="utf-8", newline="") as f:
                return [row for row in csv.reader(f)]
        except (OSError, UnicodeDecodeError, csv.Error) as e:
            logger.error(f"Failed to read roster {self.path}: {e}")
            raise IoFailure(f"Cannot read {self.path}: {e}") from e

    def has_header(self) -> bool:
        rows = self._read_rows()
        return bool(rows) and self._is_header(rows[0])

    # --- READ ---

    def read_all(self) -> List[List[str]]:
        """
        Returns every data row in file order.
        The header and blank lines are left out. A missing file reads as no rows.
        """
        rows = self._read_rows()
        if rows and self._is_header(rows[0]):
            rows = rows[1:]
        return [row for row in rows if any(field.strip() for field in row)]

    # --- WRITE ---

    def append_record(self, fields: Sequence[str]) -> None:
        """
        Appends one row, writing the header first if the file is currently empty.
        """
        write_header = self.is_empty()
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            with open(self.path, "a", encoding="utf-8", newline="") as f:
                if write_header:
                    f.write(self.header + LINE_TERMINATOR)
                f.write(encode_row(fields))
        except OSError as e:
            logger.error(f"Failed to append to roster {self.path}: {e}")
            raise IoFailure(f"Cannot write {self.path}: {e}") from e

    def write_all(self, rows: Iterable[Sequence[str]]) -> None:
        """
        Replaces the file contents with `rows`.
        The header is kept if the file had one. The new content goes to a
        temporary file that is then moved over the roster, so readers see
        either the old or the new row set.
        """
        keep_header = self.has_header()
        content = "".join(encode_row(row) for row in rows)
        if keep_header:
            content = self.header + LINE_TERMINATOR + content

        tmp_name = None
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            fd, tmp_name = tempfile.mkstemp(
                dir=str(self.path.parent), prefix=f".{self.path.name}.", suffix=".tmp"
            )
            with os.fdopen(fd, "w", encoding="utf-8", newline="") as f:
                f.write(content)
            if self.path.exists():
                shutil.copymode(self.path, tmp_name)
            os.replace(tmp_name, self.path)
            tmp_name = None
        except OSError as e:
            logger.error(f"Failed to rewrite roster {self.path}: {e}")
            raise IoFailure(f"Cannot write {self.path}: {e}") from e
        finally:
            if tmp_name and os.path.exists(tmp_name):
                os.remove(tmp_name)

        logger.debug(f"Rewrote {self.path} ({content.count(LINE_TERMINATOR)} lines)")
