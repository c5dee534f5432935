class MissingContentType(Exception):
    def __init__(self):
        super().__init__("Content-Type header is required")


class MissingContentLength(Exception):
    def __init__(self):
        super().__init__("Content-Length header is required")


class UnsupportedType(Exception):
    def __init__(self, content_type: str | None = None):
        if content_type:
            super().__init__(f"Unsupported content type: {content_type}")
        else:
            super().__init__("Unsupported content type")
        self.content_type = content_type


class TooLarge(Exception):
    def __init__(self, max_size: int):
        super().__init__(f"Content is too large (max {max_size} bytes)")
        self.max_size = max_size


class InvalidIdentifier(Exception):
    def __init__(self, file_id: str):
        super().__init__(f"Invalid file identifier: {file_id!r}")
        self.file_id = file_id


class MissingFileIdentifier(Exception):
    def __init__(self):
        super().__init__("File identifier is required")


class StoredFileNotFound(Exception):
    def __init__(self, file_id: str):
        super().__init__(f"File with id {file_id} not found.")
        self.file_id = file_id


class FailedToSaveFile(Exception):
    pass
