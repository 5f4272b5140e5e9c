"""Time-bounded caches for final answers and web search results."""
