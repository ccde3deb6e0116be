"""
Exception hierarchy shared by the ProConnect services.
"""


class ProConnectError(Exception):
    """Base class for all application errors"""


class ValidationError(ProConnectError):
    """Login input is missing or invalid"""


class ParsePriceError(ProConnectError, ValueError):
    """A price bound could not be read as an integer"""

    def __init__(self, raw_value: str):
        self.raw_value = raw_value
        super().__init__(f"Cannot parse price bound: {raw_value!r}")


class CatalogLookupError(ProConnectError, LookupError):
    """A professional id is not present in the catalog"""

    def __init__(self, professional_id):
        self.professional_id = professional_id
        super().__init__(f"No professional with id {professional_id!r} in catalog")


class CatalogLoadError(ProConnectError):
    """Catalog records failed validation at load time"""
