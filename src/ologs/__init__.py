"""
ologs – logging facade over structlog and Sentry.

Import path convention::

    from ologs.structured import new_structured_logger, with_context, from_context
    from ologs.contextual import ContextualLogger
    from ologs.levels import Severity
    from ologs.capture import SentryCaptureSink
"""

__version__ = "0.1.0"
__all__ = ["__version__"]
