"""Data models for source references and their resolved metadata."""

from __future__ import annotations

from pydantic import BaseModel


class RepoReference(BaseModel):
    """A GitHub repository identified by owner and name."""

    owner: str
    repo: str

    @property
    def full_name(self) -> str:
        return f"{self.owner}/{self.repo}"


class RepoFile(BaseModel):
    """One file in a repository tree."""

    path: str
    size: int | None = None


class VideoMetadata(BaseModel):
    """Public metadata for a video, as returned by an oEmbed endpoint."""

    video_id: str
    title: str | None = None
    author_name: str | None = None
    description: str | None = None
