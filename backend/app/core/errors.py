"""Error taxonomy shared by services and the HTTP layer.

Services raise these; ``app.main`` maps them onto JSON responses of the
form ``{"detail": "<message>"}`` using ``status_code``.
"""

from __future__ import annotations


class TrackerError(Exception):
    status_code = 500

    def __init__(self, message: str) -> None:
        super().__init__(message)
        self.message = message


class InvalidPayloadError(TrackerError):
    status_code = 400


class EntityNotFoundError(TrackerError):
    status_code = 404

    def __init__(self, entity: str) -> None:
        super().__init__(f"{entity} not found")
        self.entity = entity


class StoreError(TrackerError):
    status_code = 500
