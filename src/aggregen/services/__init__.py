"""Service layer: every operation returns a ServiceResult."""

from aggregen.services.result import ServiceError, ServiceResult

__all__ = ["ServiceError", "ServiceResult"]
