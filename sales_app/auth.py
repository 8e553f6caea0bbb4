"""Mock authentication: in-process user store and a persisted login session."""

from __future__ import annotations

import asyncio
import json
from dataclasses import asdict, dataclass
from pathlib import Path

from sales_app.clock import Clock
from sales_app.config import AUTH_DELAY_SECONDS, SESSION_PATH
from sales_app.constant import MOCK_USERS_SEED
from sales_app.debug_log import log_debug
from sales_app.models import User


@dataclass(frozen=True)
class StoredUser:
    id: str
    email: str
    password: str
    name: str

    def public(self) -> User:
        return User(id=self.id, email=self.email, name=self.name)


class UserStore:
    """Known users for this process. Seeded once, grows on register, never saved."""

    def __init__(self, seed: list[dict[str, str]] | None = None) -> None:
        rows = MOCK_USERS_SEED if seed is None else seed
        self._users: list[StoredUser] = [StoredUser(**row) for row in rows]

    def find(self, email: str) -> StoredUser | None:
        for user in self._users:
            if user.email == email:
                return user
        return None

    def add(self, user: StoredUser) -> None:
        self._users.append(user)

    def __len__(self) -> int:
        return len(self._users)


class SessionFile:
    """The logged-in user, serialized as JSON at a fixed path."""

    def __init__(self, path: str | None = None) -> None:
        self.path = Path(path or SESSION_PATH)

    def load(self) -> User | None:
        if not self.path.is_file():
            return None
        try:
            raw = json.loads(self.path.read_text(encoding="utf-8"))
            return User(id=str(raw["id"]), email=str(raw["email"]), name=str(raw["name"]))
        except (OSError, ValueError, KeyError, TypeError) as exc:
            log_debug(f"session_dropped path={self.path} error={exc!r}")
            self.clear()
            return None

    def save(self, user: User) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(asdict(user)), encoding="utf-8")

    def clear(self) -> None:
        self.path.unlink(missing_ok=True)


class AuthService:
    """Login, registration and logout against a `UserStore`.

    Each request waits `delay` seconds to mimic a remote call and answers
    with a plain success flag.
    """

    def __init__(
        self,
        store: UserStore | None = None,
        session: SessionFile | None = None,
        delay: float = AUTH_DELAY_SECONDS,
        clock: Clock | None = None,
    ) -> None:
        self.store = store or UserStore()
        self.session = session or SessionFile()
        self.delay = delay
        self.clock = clock or Clock()
        self.user: User | None = None
        self.is_loading = False

    def restore(self) -> User | None:
        self.user = self.session.load()
        return self.user

    async def login(self, email: str, password: str) -> bool:
        self.is_loading = True
        try:
            await asyncio.sleep(self.delay)
            found = self.store.find(email)
            if found is None or found.password != password:
                log_debug(f"login_failed email={email!r}")
                return False
            self._start_session(found.public())
            return True
        finally:
            self.is_loading = False

    async def register(self, email: str, password: str, name: str) -> bool:
        self.is_loading = True
        try:
            await asyncio.sleep(self.delay)
            if self.store.find(email) is not None:
                log_debug(f"register_rejected email={email!r} reason=exists")
                return False
            stored = StoredUser(id=self.clock.next_id(), email=email, password=password, name=name)
            self.store.add(stored)
            self._start_session(stored.public())
            return True
        finally:
            self.is_loading = False

    def logout(self) -> None:
        self.user = None
        self.session.clear()

    def _start_session(self, user: User) -> None:
        self.user = user
        self.session.save(user)
        log_debug(f"login user_id={user.id}")
