import logging
from typing import Dict, Iterable, Optional
from pydantic import ValidationError
from schemas.download import ResolveRequest, ResolveResult
from services.providers.base import ProviderAdapter
from utils.exceptions import (
    ServiceError,
    InvalidRequestError,
    UnsupportedPlatformError,
    MismatchedLinkError,
    PlatformNotImplementedError,
    UpstreamResolutionError,
)
from utils.url_utils import Provider, classify, parse_provider

logger = logging.getLogger(__name__)


def _validation_message(exc: ValidationError) -> str:
    parts = []
    for err in exc.errors():
        field = '.'.join(str(p) for p in err.get('loc', ())) or 'body'
        parts.append(f"{field}: {err.get('msg')}")
    return 'Invalid request: ' + '; '.join(parts)


class ResolverService:
    """Classify a link, call exactly one adapter, return a ResolveResult.

    Failures leave as ServiceError subclasses only; anything else an adapter
    raises is logged and wrapped in UpstreamResolutionError.
    """

    def __init__(self, adapters: Iterable[ProviderAdapter], enabled: Optional[Iterable[str]] = None):
        self.adapters: Dict[Provider, ProviderAdapter] = {a.provider: a for a in adapters}
        if enabled is None:
            self.enabled = set(self.adapters)
        else:
            self.enabled = {p for p in (parse_provider(name) for name in enabled) if p}

    @property
    def enabled_providers(self):
        return sorted(p.value for p in self.enabled if p in self.adapters)

    def select_provider(self, request: ResolveRequest) -> Provider:
        detected = classify(request.url)
        if request.platform:
            chosen = parse_provider(request.platform)
            if chosen is None:
                raise UnsupportedPlatformError(f"Unsupported platform: {request.platform}")
            if detected is not None and detected != chosen:
                raise MismatchedLinkError(f"This is not a {chosen.value} link")
            return chosen
        if detected is None:
            raise UnsupportedPlatformError('Unsupported platform')
        return detected

    def resolve(self, request: ResolveRequest) -> ResolveResult:
        if not request.url:
            raise InvalidRequestError('Missing url')

        provider = self.select_provider(request)
        adapter = self.adapters.get(provider)
        if adapter is None or provider not in self.enabled:
            raise PlatformNotImplementedError(f"{provider.value.capitalize()} not implemented yet")

        logger.info('Resolving %s link as %s', provider.value, request.format.value)
        try:
            result = adapter.resolve(request.url, request.format)
        except ServiceError as exc:
            logger.info('%s resolution failed (%s): %s', provider.value, type(exc).__name__, exc)
            raise
        except Exception:
            logger.exception('Unexpected %s adapter error', provider.value)
            raise UpstreamResolutionError(f"Failed to resolve {provider.value} video")
        logger.debug('Resolved %s -> %s', request.url, result.filename)
        return result

    def parse_request(self, payload) -> ResolveRequest:
        if not isinstance(payload, dict):
            raise InvalidRequestError('Invalid JSON')
        try:
            return ResolveRequest(**payload)
        except ValidationError as exc:
            raise InvalidRequestError(_validation_message(exc))

    def resolve_payload(self, payload) -> ResolveResult:
        return self.resolve(self.parse_request(payload))
