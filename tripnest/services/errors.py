# Shared base exceptions; each service derives its own from these so the
# router layer can map whole families to HTTP status codes.


class ServiceError(Exception):
    """Base exception for service errors"""

    pass


class NotAuthenticatedError(ServiceError):
    """Operation requires an authenticated caller"""

    pass


class NotFoundError(ServiceError):
    """Requested resource does not exist or is not visible to the caller"""

    pass


class PermissionDeniedError(ServiceError):
    """Permission denied for operation"""

    pass


class BusinessRuleViolationError(ServiceError):
    """Business rule violation"""

    pass
