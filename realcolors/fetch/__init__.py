from realcolors.fetch.page_source import PageSource, normalize_subreddit

__all__ = ["PageSource", "normalize_subreddit"]
