# expense_tracker/auth/services.py

import logging

import bcrypt
from sqlalchemy import or_, select
from sqlalchemy.exc import IntegrityError

from expense_tracker.errors import Conflict, Unauthorized
from expense_tracker.models import User

logger = logging.getLogger(__name__)

BCRYPT_ROUNDS = 10


def hash_password(password: str, rounds: int = BCRYPT_ROUNDS) -> str:
    return bcrypt.hashpw(password.encode("utf-8"), bcrypt.gensalt(rounds=rounds)).decode("utf-8")


def verify_password(password: str, hashed_password: str) -> bool:
    return bcrypt.checkpw(password.encode("utf-8"), hashed_password.encode("utf-8"))


class CredentialStore:
    """Users and their hashed passwords, looked up by email or phone."""

    def __init__(self, session, rounds: int = BCRYPT_ROUNDS):
        self.session = session
        self.rounds = rounds

    def get_by_id(self, user_id):
        return self.session.get(User, user_id)

    def find_by_key(self, key: str):
        stmt = select(User).where(or_(User.email == key, User.phone == key))
        return self.session.scalars(stmt).first()

    def signup(self, data) -> User:
        existing = self.session.scalars(
            select(User).where(or_(User.email == data.email, User.phone == data.phone))
        ).first()
        if existing:
            raise Conflict("User with this email or phone already exists")

        user = User(
            name=data.name,
            email=data.email,
            phone=data.phone,
            password=hash_password(data.password, self.rounds),
            profession=data.profession,
        )

        self.session.add(user)
        try:
            self.session.commit()
        except IntegrityError:
            self.session.rollback()
            raise Conflict("User with this email or phone already exists")

        logger.info("Registered user %s", user.id)
        return user

    def login(self, data) -> User:
        user = self.find_by_key(data.key)

        # same answer for unknown key and wrong password
        if user is None or not verify_password(data.password, user.password):
            logger.warning("Failed login attempt")
            raise Unauthorized("Invalid credentials")

        return user
