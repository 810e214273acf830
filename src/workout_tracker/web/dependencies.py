"""Accessors for collaborators stored on the application state."""

from fastapi import Request
from fastapi.templating import Jinja2Templates

from ..chat.model import ChatModel
from ..db.store import DataStore
from ..events import StaleViewNotifier
from .view_cache import ViewCache


def get_templates(request: Request) -> Jinja2Templates:
    """Get templates from app state."""
    return request.app.state.templates


def get_store(request: Request) -> DataStore:
    return request.app.state.store


def get_notifier(request: Request) -> StaleViewNotifier:
    return request.app.state.notifier


def get_view_cache(request: Request) -> ViewCache:
    return request.app.state.view_cache


def get_model(request: Request) -> ChatModel:
    return request.app.state.model
