"""Admin FastAPI application."""

from fastapi import FastAPI
from sqladmin import Admin

from cineticket.admin.auth import AdminAuth
from cineticket.admin.views import MovieAdmin, ShowAdmin
from cineticket.config import settings
from cineticket.database import engine


def create_admin_app() -> FastAPI:
    app = FastAPI(title="CineTicket Admin")
    auth = AdminAuth(secret_key=settings.admin_secret_key)
    admin = Admin(app, engine, authentication_backend=auth, title="CineTicket Admin")
    for view in [MovieAdmin, ShowAdmin]:
        admin.add_view(view)
    return app


admin_app = create_admin_app()
