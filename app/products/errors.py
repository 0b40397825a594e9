"""
Errors raised while handling a create-product request.
"""


class ProductCreationError(Exception):
    """Base error; rendered as {"ok": false, "error": message}."""

    status_code = 500

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class MethodNotAllowed(ProductCreationError):
    status_code = 405

    def __init__(self, message: str = "Method Not Allowed"):
        super().__init__(message)


class Unauthorized(ProductCreationError):
    status_code = 401

    def __init__(self, message: str = "Unauthorized"):
        super().__init__(message)


class ConfigurationMissing(ProductCreationError):
    """Required Shopify settings are not set."""
    status_code = 500


class InvalidPayload(ProductCreationError):
    status_code = 400


class UpstreamCreateFailed(ProductCreationError):
    """Shopify rejected the product or returned no product."""
    status_code = 500


class UpstreamLocationsUnavailable(ProductCreationError):
    """No location could be resolved for inventory writes."""
    status_code = 500


class UnexpectedError(ProductCreationError):
    status_code = 500
