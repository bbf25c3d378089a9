class ServiceError(Exception):
    """Base exception for service layer errors.

    ``status_code`` is the HTTP status the routes answer with.
    """

    status_code = 500
    default_message = 'Server error'

    def __init__(self, message=None):
        super().__init__(message or self.default_message)

    @property
    def message(self):
        return str(self)


class InvalidRequestError(ServiceError):
    status_code = 400
    default_message = 'Missing url'


class UnsupportedPlatformError(ServiceError):
    status_code = 400
    default_message = 'Unsupported platform'


class MismatchedLinkError(ServiceError):
    status_code = 400
    default_message = 'Link does not match the selected platform'


class InvalidUrlError(ServiceError):
    status_code = 400
    default_message = 'Invalid URL'


class NoFormatAvailableError(ServiceError):
    default_message = 'No suitable format found'


class UpstreamResolutionError(ServiceError):
    default_message = 'Failed to resolve video'


class UpstreamUnreachableError(ServiceError):
    default_message = 'Cannot reach upstream provider'


class PlatformNotImplementedError(ServiceError):
    status_code = 501
    default_message = 'Platform not implemented yet'


class ExternalServiceError(ServiceError):
    pass
