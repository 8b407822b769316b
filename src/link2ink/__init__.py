"""Link2Ink - turn articles, documents, text, videos and repositories into infographics."""

__version__ = "0.1.0"
