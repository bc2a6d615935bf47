"""
Local persistence layer.

Responsibilities:
- Store favorites and user preferences as JSON documents on disk.
- Replace files atomically so a crash never leaves half a document.
- Maintain the bounded recommendation history and its statistics.
- Recover from unreadable files with defaults instead of raising.
"""
