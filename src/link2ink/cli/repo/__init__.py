"""Repository commands: repo, repo-3d, ask."""

from .commands import repo, repo_3d, ask

__all__ = ["repo", "repo_3d", "ask"]
