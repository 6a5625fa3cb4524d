"""BaseService: shared error translation for tracectl services.

Domain and infrastructure code raises :class:`TracectlError` subclasses.
Services catch them at the operation boundary and hand back a failed
:class:`ServiceResult` instead of propagating.
"""

from __future__ import annotations

import logging
from typing import Any

from tracectl.domain.errors import TracectlError
from tracectl.services.result import ServiceError, ServiceResult

logger = logging.getLogger(__name__)


class BaseService:
    """Base for service-layer classes.

    Usage::

        class ResourceService(BaseService):
            def get(self, resource: str, path: str) -> ServiceResult:
                try:
                    ...
                except TracectlError as exc:
                    return self._failure("get_resource", exc)
    """

    @staticmethod
    def _failure(op: str, exc: TracectlError, **detail: Any) -> ServiceResult:
        """Build a failed result from a typed error."""
        logger.debug("%s failed: %s", op, exc, exc_info=True)
        if exc.__cause__ is not None:
            detail.setdefault("cause", str(exc.__cause__))
        return ServiceResult(
            ok=False,
            op=op,
            error=ServiceError(code=exc.code, message=str(exc), detail=detail),
        )
