"""SQLAdmin authentication backend."""

import secrets

from sqladmin.authentication import AuthenticationBackend
from starlette.requests import Request

from cineticket.config import settings


class AdminAuth(AuthenticationBackend):
    async def login(self, request: Request) -> bool:
        form = await request.form()
        username = str(form.get("username") or "").encode()
        password = str(form.get("password") or "").encode()
        ok = secrets.compare_digest(
            username, settings.admin_username.encode()
        ) & secrets.compare_digest(password, settings.admin_password.encode())
        if ok:
            request.session.update({"authenticated": True})
        return ok

    async def logout(self, request: Request) -> bool:
        request.session.clear()
        return True

    async def authenticate(self, request: Request) -> bool:
        return bool(request.session.get("authenticated", False))
