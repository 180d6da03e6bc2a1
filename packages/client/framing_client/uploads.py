"""Upload guard - keeps a photo selection under the transport's body ceiling.

The API sits behind a serverless platform that rejects request bodies a
little over 4.5 MB, so selections are capped at 4 MB before anything is sent.
The server does not re-check this budget.
"""

import mimetypes
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from pathlib import Path

MAX_UPLOAD_SIZE_MB = 4
MAX_UPLOAD_SIZE_BYTES = MAX_UPLOAD_SIZE_MB * 1024 * 1024

QUOTE_MAX_FILES = 3
BUSINESS_INQUIRY_MAX_FILES = 5

# Show the running total as a warning above this share of the budget
NEAR_LIMIT_RATIO = 0.9

Notifier = Callable[[str], None]


def format_file_size(size: int) -> str:
    """
    Human-readable size: "0 MB", "512.0 KB" below 0.1 MB, else "1.2 MB".
    """
    if size == 0:
        return "0 MB"
    mb = size / (1024 * 1024)
    if mb < 0.1:
        return f"{size / 1024:.1f} KB"
    return f"{mb:.1f} MB"


def total_size(files: Iterable["UploadFile"]) -> int:
    return sum(f.size for f in files)


@dataclass(frozen=True)
class UploadFile:
    """An image selected for upload, held fully in memory."""

    name: str
    content_type: str
    data: bytes

    @property
    def size(self) -> int:
        return len(self.data)

    @classmethod
    def from_path(cls, path: str | Path) -> "UploadFile":
        path = Path(path)
        content_type, _ = mimetypes.guess_type(path.name)
        return cls(
            name=path.name,
            content_type=content_type or "application/octet-stream",
            data=path.read_bytes(),
        )


class UploadGuard:
    """
    Tracks a bounded photo selection.

    Additions are all-or-nothing: when the combined file count or byte size
    would exceed the limits, the whole batch is rejected with one message and
    the current selection is left as it was.
    """

    def __init__(
        self,
        max_files: int,
        max_bytes: int = MAX_UPLOAD_SIZE_BYTES,
        notify: Notifier | None = None,
        over_budget_hint: str = "Please use smaller images.",
    ) -> None:
        self.max_files = max_files
        self.max_bytes = max_bytes
        self._notify = notify or (lambda _message: None)
        self._over_budget_hint = over_budget_hint
        self._files: list[UploadFile] = []

    @classmethod
    def for_quote(cls, notify: Notifier | None = None) -> "UploadGuard":
        return cls(QUOTE_MAX_FILES, notify=notify)

    @classmethod
    def for_business_inquiry(cls, notify: Notifier | None = None) -> "UploadGuard":
        return cls(
            BUSINESS_INQUIRY_MAX_FILES,
            notify=notify,
            over_budget_hint="Please use smaller images or provide a link.",
        )

    @property
    def files(self) -> list[UploadFile]:
        return list(self._files)

    @property
    def total_bytes(self) -> int:
        return total_size(self._files)

    @property
    def is_full(self) -> bool:
        return len(self._files) >= self.max_files

    @property
    def near_limit(self) -> bool:
        return self.total_bytes > self.max_bytes * NEAR_LIMIT_RATIO

    @property
    def max_megabytes(self) -> int:
        return self.max_bytes // (1024 * 1024)

    def add(self, new_files: Iterable[UploadFile]) -> bool:
        """Add a batch of files. Returns False (and notifies) on rejection."""
        batch = list(new_files)
        if len(self._files) + len(batch) > self.max_files:
            self._notify(f"Maximum {self.max_files} images allowed")
            return False

        if self.total_bytes + total_size(batch) > self.max_bytes:
            self._notify(
                f"Total upload size exceeds {self.max_megabytes}MB limit. "
                f"{self._over_budget_hint}"
            )
            return False

        self._files.extend(batch)
        return True

    def remove(self, index: int) -> None:
        """Drop the file at ``index``; out-of-range indexes are ignored."""
        if 0 <= index < len(self._files):
            del self._files[index]

    def clear(self) -> None:
        self._files.clear()

    def describe_total(self) -> str:
        """Running total for display, e.g. "1.2 MB / 4 MB"."""
        return f"{format_file_size(self.total_bytes)} / {self.max_megabytes} MB"

    def __len__(self) -> int:
        return len(self._files)
