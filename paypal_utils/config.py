import os

from paypal_utils.interfaces.payment_information import ClientOptions, Credentials


class ImproperlyConfigured(ValueError):
    pass


def _required(name):
    value = os.getenv(name)
    if not value:
        raise ImproperlyConfigured(f"{name} environment variable is not set")

    return value


def options_from_env():
    """
    Builds ClientOptions from PAYPAL_* environment variables. Sandbox is the
    default, production must be asked for with PAYPAL_SANDBOX=false.
    """
    credentials = Credentials(
        client_id=_required("PAYPAL_CLIENT_ID"),
        client_secret=_required("PAYPAL_CLIENT_SECRET"),
    )
    is_sandbox = os.getenv("PAYPAL_SANDBOX", "true").lower() == "true"
    timeout = os.getenv("PAYPAL_TIMEOUT")

    return ClientOptions(
        is_sandbox=is_sandbox,
        credentials=credentials,
        mock_application_code=os.getenv("PAYPAL_MOCK_APPLICATION_CODE") or None,
        timeout=float(timeout) if timeout else None,
    )
