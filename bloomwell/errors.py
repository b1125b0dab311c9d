"""Exception types raised by the insight engine."""


class WellnessError(Exception):
    """Base error carrying the failing operation and the user it ran for."""

    def __init__(self, message: str, operation: str, user_id: str | None = None):
        super().__init__(message)
        self.operation = operation
        self.user_id = user_id

    def to_dict(self) -> dict:
        return {"operation": self.operation, "user_id": self.user_id}


class DataSourceError(WellnessError):
    """The data source could not supply one of the entry series."""


class ReportExportError(WellnessError):
    """Writing a structured or flat export failed."""

    def __init__(
        self,
        message: str,
        operation: str,
        user_id: str | None = None,
        path: str | None = None,
    ):
        super().__init__(message, operation, user_id)
        self.path = path

    def to_dict(self) -> dict:
        data = super().to_dict()
        data["path"] = self.path
        return data
