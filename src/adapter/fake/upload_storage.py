"""In-memory implementation of UploadStorage for testing."""

from domain.model.upload import Upload


class FakeUploadStorage:
    def __init__(self):
        self.files: dict[str, bytes] = {}

    def save(self, upload: Upload) -> str:
        path = f"/uploads/{len(self.files) + 1}{upload.extension}"
        self.files[path] = upload.data
        return path
