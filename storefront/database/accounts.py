"""Account storage for the storefront"""

import logging
from typing import Optional

from ..core.errors import AccountExistsError, InvalidCredentialsError
from ..models.account import Account
from ..models.cart import Cart
from .document import JsonDocument

logger = logging.getLogger(__name__)


class AccountDatabase:
    """Accounts kept in the "users" list of the database document"""

    def __init__(self, document: JsonDocument):
        self.document = document

    def get_account(self, email: str) -> Optional[Account]:
        """Get an account by email"""
        users = self.document.read().get("users", [])
        record = next((u for u in users if u.get("email") == email), None)
        return Account.model_validate(record) if record else None

    def create_account(self, email: str, password: str) -> Account:
        """
        Register a new account together with its empty cart.

        Both are added in the same document write, so either both exist
        afterwards or neither does. A cart already stored under the email is
        kept as it is.

        Raises:
            AccountExistsError: if the email is already registered
        """
        db = self.document.read()
        users = db.setdefault("users", [])
        if any(u.get("email") == email for u in users):
            logger.info(f"Registration rejected, account exists: {email}")
            raise AccountExistsError(email)

        account = Account(email=email, password=password)
        users.append(account.model_dump())
        db.setdefault("carts", {}).setdefault(email, Cart().model_dump())
        self.document.write(db)

        logger.info(f"Account created: {email}")
        return account

    def verify_credentials(self, email: str, password: str) -> Account:
        """
        Check an email/password pair against the stored accounts.

        Plain equality on both fields; there is no hashing.

        Raises:
            InvalidCredentialsError: if no account matches both fields
        """
        users = self.document.read().get("users", [])
        record = next(
            (u for u in users if u.get("email") == email and u.get("password") == password),
            None,
        )
        if not record:
            logger.info(f"Login failed for {email}")
            raise InvalidCredentialsError()
        return Account.model_validate(record)
