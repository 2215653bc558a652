"""Service layer: every operation returns a ServiceResult."""

from oopnotes.services.result import ServiceError, ServiceResult

__all__ = ["ServiceError", "ServiceResult"]
