"""Allow running as ``python -m link2ink``."""

from .cli import main

if __name__ == "__main__":
    main()
