from sqlalchemy.exc import SQLAlchemyError


class ServiceError(Exception):
    """Base error rendered as {"ok": false, "error": message}"""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class OrderValidationError(ServiceError):
    status_code = 400


class OrderConflictError(ServiceError):
    status_code = 409

    def __init__(self, ord_id: int):
        super().__init__(f"ORD_ID {ord_id} already exists")
        self.ord_id = ord_id


class StorageError(ServiceError):
    status_code = 500

    @classmethod
    def from_exc(cls, exc: SQLAlchemyError) -> "StorageError":
        # Surface the driver's own message (ORA-xxxxx, sqlite3 errors, ...)
        orig = getattr(exc, "orig", None)
        return cls(str(orig) if orig is not None else str(exc))
