"""
Backend package for the multi-model chat application.

This package contains the core backend service components including:
- Flask application and API routes
- Model dispatch across the OpenAI and Anthropic providers
- Conversation and document storage (in-memory or SQL)
- Identity resolution for owner-scoped routes
- Configuration and prompt modules
"""

import logging
import os

# Configure logging with clickable paths before anything else imports logging
logging.basicConfig(
    level=os.getenv("LOG_LEVEL", "INFO").upper(),
    format="%(levelname)s: %(pathname)s:%(lineno)d %(message)s",
)


class ClickablePathFilter(logging.Filter):
    """Filter to make file paths clickable in the terminal."""

    def filter(self, record: logging.LogRecord) -> bool:
        if hasattr(record, "pathname"):
            # Convert absolute path to relative path from workspace root
            workspace_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
            try:
                record.pathname = os.path.relpath(record.pathname, workspace_root)
            except ValueError:
                # If path is not under workspace root, keep it as is
                pass
        return True


# Handler filters also see records propagated from child loggers
for _handler in logging.getLogger().handlers:
    _handler.addFilter(ClickablePathFilter())
