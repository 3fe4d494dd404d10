"""
Logger shared by the meal planner Lambda handlers.

Service modules create their own ``Logger()``; the handlers use this one so
request context (function name, version, region) is attached once per cold
start. Exception records carry their traceback as a single line, which keeps
one failed generation to one CloudWatch event.
"""
import os
import sys
import json
import traceback
from typing import Optional

from aws_lambda_powertools import Logger


def one_line_traceback(exc_info) -> Optional[str]:
    """
    Render an exception as a single ``|``-separated line.

    Args:
        exc_info: ``True`` for the exception being handled, or an
            ``(type, value, traceback)`` tuple

    Returns:
        The flattened traceback, or None when there is no exception
    """
    if exc_info is True:
        exc_info = sys.exc_info()
    if not isinstance(exc_info, tuple) or len(exc_info) != 3 or exc_info[0] is None:
        return None
    lines = traceback.format_exception(*exc_info)
    return ' | '.join(line.strip() for chunk in lines for line in chunk.splitlines() if line.strip())


class MealPlannerLogger(Logger):
    """Powertools logger whose ``exception`` records keep the traceback on one line."""

    def exception(self, message, *args, **kwargs):
        extra = dict(kwargs.pop('extra', None) or {})
        extra['exception'] = one_line_traceback(kwargs.pop('exc_info', True))
        super().exception(message, *args, exc_info=False, extra=extra, **kwargs)


logger = MealPlannerLogger(
    service=os.environ.get('POWERTOOLS_SERVICE_NAME', 'meal_planner'),
    level=os.environ.get('LOG_LEVEL', 'INFO'),
    log_uncaught_exceptions=True,
    json_serializer=json.dumps,
    use_rfc3339=True
)

logger.append_keys(
    region=os.environ.get('AWS_REGION'),
    function=os.environ.get('AWS_LAMBDA_FUNCTION_NAME'),
    version=os.environ.get('AWS_LAMBDA_FUNCTION_VERSION')
)


def log_exception(target: Logger, message: str, exc_info=None, **kwargs) -> None:
    """
    Log a handled failure at error level with its one-line traceback.

    Used where the failure is expected (e.g. the generation service is down)
    and the handler answers with an error response instead of re-raising.
    """
    extra = dict(kwargs.pop('extra', None) or {})
    extra['exception'] = one_line_traceback(exc_info or sys.exc_info())
    target.error(message, extra=extra, **kwargs)
