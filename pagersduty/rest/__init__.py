"""PagerDuty REST API v2 client.

Example:
    >>> from pagersduty.rest import RestApi
    >>> with RestApi(token="...") as api:
    ...     team = api.team("PRJ4D5C")
"""

from pagersduty.rest.client import RestApi, RestApiCallContext

__all__ = [
    "RestApi",
    "RestApiCallContext",
]
