class MissingArgument(ValueError):
    """Raised when a required file name is empty or missing"""


class PathNotFound(FileNotFoundError):
    """Raised in strict mode when a directory or file does not exist"""

    def __init__(self, path, message=None):
        self.path = str(path)
        super().__init__(message or f"Path '{self.path}' does not exist.")
