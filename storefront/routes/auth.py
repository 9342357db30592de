"""Registration and login routes"""

from fastapi import APIRouter, Depends

from ..models.account import Credentials, AuthResponse
from ..database.accounts import AccountDatabase
from ..dependencies import get_account_db

router = APIRouter(prefix="/api", tags=["Auth"])


@router.post("/register", response_model=AuthResponse)
def register(
    request: Credentials,
    account_db: AccountDatabase = Depends(get_account_db),
):
    """
    Register a new account.

    Creates the account and its empty cart. Fails with 409 if the email is
    already registered.
    """
    account = account_db.create_account(request.email, request.password)
    return AuthResponse(email=account.email)


@router.post("/login", response_model=AuthResponse)
def login(
    request: Credentials,
    account_db: AccountDatabase = Depends(get_account_db),
):
    """
    Check credentials.

    Nothing is issued on success; the client sends the returned email as its
    identity on later requests.
    """
    account = account_db.verify_credentials(request.email, request.password)
    return AuthResponse(email=account.email)
