"""View layer: view models, pure builders, formatting, and kida rendering."""

from watchclub.views.models import Message, NavLink, NavView, Notice
from watchclub.views.render import Renderer, create_environment

__all__ = ["Message", "NavLink", "NavView", "Notice", "Renderer", "create_environment"]
