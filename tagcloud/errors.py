class TagCloudError(Exception):
    """Base class for failures that end a tag cloud run."""


class ConfigError(TagCloudError):
    pass


class InvalidWordCountError(TagCloudError):
    pass


class OutputOpenError(TagCloudError):
    pass


class InputOpenError(TagCloudError):
    pass


class InputReadError(TagCloudError):
    pass
