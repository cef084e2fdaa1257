"""Core building blocks for b2fs: API access, sessions and configuration."""
