"""Session lookup used to resolve the calling user."""
