from __future__ import annotations

from typing import Optional


class BlogIndexError(ValueError):
    def __init__(self, message: str, path: Optional[str] = None) -> None:
        self.path = path
        if path:
            message = f"{path}: {message}"
        super().__init__(message)


class MalformedFrontMatter(BlogIndexError):
    pass


class MissingRequiredField(BlogIndexError):
    def __init__(self, field: str, path: Optional[str] = None) -> None:
        self.field = field
        super().__init__(f"missing required field '{field}'", path)


class InvalidDateFormat(BlogIndexError):
    def __init__(self, value: object, path: Optional[str] = None) -> None:
        self.value = value
        super().__init__(f"invalid date {value!r} (expected ISO-8601 date or date-time)", path)


class InvalidFieldValue(BlogIndexError):
    def __init__(self, field: str, value: object, path: Optional[str] = None) -> None:
        self.field = field
        self.value = value
        super().__init__(f"invalid value for '{field}': {value!r}", path)


class CollectionBuildError(BlogIndexError):
    def __init__(self, path: str, error: Exception) -> None:
        self.error = error
        # File-level errors already carry the path in their message.
        detail = str(error)
        if isinstance(error, BlogIndexError) and error.path:
            super().__init__(detail)
            self.path = path
        else:
            super().__init__(detail, path)
