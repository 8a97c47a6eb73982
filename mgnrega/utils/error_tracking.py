"""Error tracking and monitoring setup."""
import os
import logging
from typing import Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration


SENSITIVE_HEADERS = {'authorization', 'api-key', 'x-api-key', 'x-auth-token',
                     'cookie', 'set-cookie', 'password', 'secret'}
SENSITIVE_KEYS = ['password', 'secret', 'api_key', 'apikey', 'key', 'token', 'auth']
SENSITIVE_ENV_VARS = ['API_KEY', 'SECRET', 'PASSWORD', 'TOKEN', 'AUTH']


def filter_sensitive_data(event, hint):
    """Filter sensitive data from Sentry events."""
    # Geocoding providers take their credential as a query parameter
    request = event.get('request')
    if request:
        if 'headers' in request:
            request['headers'] = {
                k: '***REDACTED***' if k.lower() in SENSITIVE_HEADERS else v
                for k, v in request['headers'].items()
            }

        data = request.get('data')
        if isinstance(data, dict):
            for key in SENSITIVE_KEYS:
                if key in data:
                    data[key] = '***REDACTED***'

        if request.get('query_string'):
            request['query_string'] = '***REDACTED***'

    env = event.get('environment')
    if isinstance(env, dict):
        for key in list(env.keys()):
            if any(sensitive in key.upper() for sensitive in SENSITIVE_ENV_VARS):
                env[key] = '***REDACTED***'

    return event


def setup_error_tracking(
    dsn: Optional[str] = None,
    environment: Optional[str] = None,
    release: Optional[str] = None,
    traces_sample_rate: float = 0.1
) -> bool:
    """
    Setup Sentry error tracking.

    Args:
        dsn: Sentry DSN (if None, will try to get from SENTRY_DSN env var)
        environment: Environment name (development, staging, production)
        release: Release version
        traces_sample_rate: Percentage of transactions to trace (0.0 to 1.0)

    Returns:
        True if Sentry was initialized, False otherwise
    """
    dsn = dsn or os.getenv("SENTRY_DSN")
    if not dsn:
        logging.info("Sentry DSN not provided. Error tracking disabled.")
        return False

    environment = environment or os.getenv("ENVIRONMENT", "development")
    release = release or os.getenv("RELEASE", "unknown")

    sentry_sdk.init(
        dsn=dsn,
        environment=environment,
        release=release,
        integrations=[
            LoggingIntegration(level=logging.INFO, event_level=logging.ERROR),
        ],
        traces_sample_rate=traces_sample_rate,
        before_send=filter_sensitive_data,
        attach_stacktrace=True,
        send_default_pii=False,
        debug=os.getenv("SENTRY_DEBUG", "false").lower() == "true",
    )

    logging.info(f"Sentry error tracking initialized for environment: {environment}")
    return True


def capture_exception(error: Exception, context: Optional[dict] = None) -> bool:
    """Capture exception and send to Sentry if a client is configured."""
    if not sentry_sdk.get_client().is_active():
        return False

    with sentry_sdk.new_scope() as scope:
        if context:
            for key, value in context.items():
                scope.set_context(key, {"value": str(value)})
        sentry_sdk.capture_exception(error)
    return True


def capture_message(message: str, level: str = "error", context: Optional[dict] = None) -> bool:
    """Capture message and send to Sentry if a client is configured."""
    if not sentry_sdk.get_client().is_active():
        return False

    with sentry_sdk.new_scope() as scope:
        if context:
            for key, value in context.items():
                scope.set_context(key, {"value": str(value)})
        sentry_sdk.capture_message(message, level=level)
    return True
