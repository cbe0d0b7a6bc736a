class ImageResizeError(Exception):
    pass


class InvalidRecordError(ImageResizeError):
    pass


class ObjectNotFound(ImageResizeError):
    pass


class AccessDenied(ImageResizeError):
    pass


class TransientStorageError(ImageResizeError):
    pass


class UnsupportedFormat(ImageResizeError):
    pass


class CorruptData(ImageResizeError):
    pass
