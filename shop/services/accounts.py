# shop/services/accounts.py
import logging

from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from werkzeug.security import generate_password_hash, check_password_hash

from ..errors import DuplicateEmail, InvalidCredentials, InvalidRequest, StorageError
from ..model import User

log = logging.getLogger(__name__)


def _require_str(value, field):
    if not isinstance(value, str) or not value:
        raise InvalidRequest(f"{field} is required")
    return value


class AccountService:
    """
    Registration and login.

    Emails are stored exactly as submitted (no case folding) and there is no
    password policy. Only a werkzeug hash of the password is persisted.
    """

    def __init__(self, session):
        self.session = session

    def register(self, email, password) -> User:
        email = _require_str(email, "email")
        password = _require_str(password, "password")

        user = User(email=email, password_hash=generate_password_hash(password))
        try:
            self.session.add(user)
            self.session.commit()
        except IntegrityError as e:
            # UNIQUE(email) is the only constraint on users; concurrent
            # registrations race here and exactly one wins
            self.session.rollback()
            log.debug("Registration rejected, email already present")
            raise DuplicateEmail() from e
        except SQLAlchemyError as e:
            self.session.rollback()
            log.exception("Registration failed")
            raise StorageError() from e
        return user

    def login(self, email, password) -> User:
        if not isinstance(email, str) or not isinstance(password, str):
            raise InvalidCredentials()
        try:
            user = self.session.query(User).filter_by(email=email).first()
        except SQLAlchemyError as e:
            self.session.rollback()
            log.exception("Login lookup failed")
            raise StorageError() from e
        # same error for unknown email and wrong password
        if not user or not user.password_hash or not check_password_hash(user.password_hash, password):
            raise InvalidCredentials()
        return user
