"""Error taxonomy shared by the repository and handler layers.

Repositories raise these; the FastAPI exception handlers registered in
``repairdesk.main`` turn them into ``{"error": ...}`` responses using the
``status_code`` carried by each class.
"""


class RepairDeskError(Exception):
    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ValidationError(RepairDeskError):
    """Missing or malformed field, unresolved required edge, bad path id."""
    status_code = 400


class ConflictError(RepairDeskError):
    """Unique field or unique edge already claimed, or a blocked delete."""
    status_code = 400


class NotFoundError(RepairDeskError):
    status_code = 404


class StoreError(RepairDeskError):
    """Any other failure reported by the relational store."""
    status_code = 500
