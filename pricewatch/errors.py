"""Exception types raised across pricewatch."""


class PriceWatchError(Exception):
    """Base class for all pricewatch errors."""


class TransportError(PriceWatchError):
    """Page could not be fetched (connection failure or non-2xx status)."""

    def __init__(self, url: str, message: str, status: int | None = None):
        super().__init__(f"{message} ({url})")
        self.url = url
        self.status = status


class ExtractionError(PriceWatchError):
    """The page was fetched but no usable price could be parsed."""


class Unavailable(PriceWatchError):
    """The item is out of stock or no extractor can handle it."""


class ClassificationAmbiguous(PriceWatchError):
    """The resolver could not assign a tier. Logged, never raised to callers."""


class ConfigError(PriceWatchError):
    """Stored configuration is malformed."""


class StoreError(PriceWatchError):
    """The persistent store could not be read or written."""


class SweepInProgress(PriceWatchError):
    """A sweep was requested while another one is still running."""


class TrackingError(PriceWatchError):
    """A URL could not be added to the tracked items."""
