"""Allow running the hook with ``python -m commit_review``."""

from commit_review.main import main

if __name__ == "__main__":
    main()
