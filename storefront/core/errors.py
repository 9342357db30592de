"""Error hierarchy for the storefront.

Domain errors carry the HTTP status they map to; `register_error_handlers`
turns any `StorefrontError` into `{"error": message, "code": code}`.
"""


class StorefrontError(Exception):
    """Base exception for all storefront errors."""

    def __init__(self, message: str, code: str, http_status: int = 500):
        super().__init__(message)
        self.message = message
        self.code = code
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to the REST error body."""
        return {"error": self.message, "code": self.code}


# ─── Domain Errors (400-level) ──────────────────────────────────

class AccountExistsError(StorefrontError):
    """Registration for an email that already has an account."""
    def __init__(self, email: str):
        super().__init__("User already exists", "ACCOUNT_EXISTS", 409)
        self.email = email


class InvalidCredentialsError(StorefrontError):
    """No account matches both email and password."""
    def __init__(self):
        super().__init__("Invalid email or password", "INVALID_CREDENTIALS", 401)


class MissingIdentityError(StorefrontError):
    """Request did not assert a user email."""
    def __init__(self):
        super().__init__("No user email provided", "MISSING_IDENTITY", 401)


class OutOfStockError(StorefrontError):
    """Adding one more unit would exceed available stock."""
    def __init__(self, product_id: int, stock: int):
        super().__init__("Not enough in stock", "OUT_OF_STOCK", 400)
        self.product_id = product_id
        self.stock = stock


class ProductNotFoundError(StorefrontError):
    """Product id is not in the catalog."""
    def __init__(self, product_id: int):
        super().__init__("Product not found", "PRODUCT_NOT_FOUND", 404)
        self.product_id = product_id


# ─── Infrastructure Errors (500-level) ──────────────────────────

class StorageError(StorefrontError):
    """A JSON document could not be read or written."""
    def __init__(self, message: str, path: str):
        super().__init__(message, "STORAGE_ERROR", 500)
        self.path = path
