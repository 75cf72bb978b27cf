from typing import Protocol

from domain.model.upload import Upload


class UploadStorage(Protocol):
    def save(self, upload: Upload) -> str:
        """Persist the file and return its public reference path."""
        ...
