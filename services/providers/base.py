from abc import ABC, abstractmethod
from schemas.download import MediaFormat, ResolveResult
from utils.url_utils import Provider


class ProviderAdapter(ABC):
    """Turns one provider's share link into a uniform ``ResolveResult``."""

    provider: Provider

    @abstractmethod
    def resolve(self, url: str, fmt: MediaFormat) -> ResolveResult:
        raise NotImplementedError
