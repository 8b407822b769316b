"""Infographic commands: article, text, file, youtube, edit."""

from .commands import article, text, file, youtube, edit

__all__ = ["article", "text", "file", "youtube", "edit"]
