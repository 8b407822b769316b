"""Link2Ink command line interface.

Package layout:
- core/: Shared utilities (types, validators, parsers, paths, session)
- infographic/: article, text, file, youtube and edit commands
- repo/: repository analysis, 3D variant and component questions
- credential/: API key status, set and clear

Usage:
    python -m link2ink --help
    link2ink article https://example.com/post
    link2ink youtube https://youtu.be/dQw4w9WgXcQ
"""

from .app import app, main

__all__ = ["app", "main"]
