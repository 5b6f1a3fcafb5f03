"""HTTP middleware: request size limit and API request logging.

Applied in main app; order matters (first added = outermost).
"""

from casetrack.middleware.request_logging import RequestLoggingMiddleware
from casetrack.middleware.request_size_limit import RequestSizeLimitMiddleware

__all__ = ["RequestLoggingMiddleware", "RequestSizeLimitMiddleware"]
