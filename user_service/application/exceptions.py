class StorageError(Exception):
    """Persistence failure below the application layer."""

    def __init__(self, message: str, operation: str):
        super().__init__(f"Storage {operation} failed: {message}")
        self.message = message
        self.operation = operation


class DuplicateEmailError(StorageError):
    """Insert rejected by the unique constraint on email."""

    def __init__(self, email: str):
        super().__init__("email already exists", "insert")
        self.email = email
