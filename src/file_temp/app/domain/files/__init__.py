from .entities import StoredFile
from .value_objects import Charset, FileType, IdentifierPolicy, UploadPolicy, parse_size
from .interfaces import FileStorage, FileTypeSniffer, IdentifierGenerator

__all__ = [
    "StoredFile",
    "Charset",
    "FileType",
    "IdentifierPolicy",
    "UploadPolicy",
    "parse_size",
    "FileStorage",
    "FileTypeSniffer",
    "IdentifierGenerator",
]
