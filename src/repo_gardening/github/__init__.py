"""GitHub API access used by gardening tasks."""
