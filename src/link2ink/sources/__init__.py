"""Source parsing and metadata resolution (YouTube, GitHub)."""

from .models import RepoFile, RepoReference, VideoMetadata
from .youtube import VideoMetadataResolver, canonical_video_url, extract_video_id
from .github import GitHubTreeClient, is_relevant_path, parse_repo_reference

__all__ = [
    "RepoFile",
    "RepoReference",
    "VideoMetadata",
    "VideoMetadataResolver",
    "canonical_video_url",
    "extract_video_id",
    "GitHubTreeClient",
    "is_relevant_path",
    "parse_repo_reference",
]
