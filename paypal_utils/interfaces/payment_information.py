from enum import Enum
from typing import Optional


class Credentials:
    def __init__(self, client_id: str, client_secret: str):
        self._client_id = client_id
        self._client_secret = client_secret

    @property
    def client_id(self):
        return self._client_id

    @property
    def client_secret(self):
        return self._client_secret

    def __repr__(self):
        # Never leak the secret into logs or tracebacks.
        return f"Credentials(client_id={self._client_id!r}, client_secret='***')"


class ClientOptions:
    def __init__(
        self,
        is_sandbox: bool,
        credentials: Credentials,
        mock_application_code: Optional[str] = None,
        timeout: Optional[float] = None,
    ):
        """
        is_sandbox controls which PayPal base url the client talks to.

        mock_application_code is only honoured in sandbox mode, see
        https://developer.paypal.com/tools/sandbox/negative-testing/request-headers/
        """
        self.is_sandbox = is_sandbox
        self.credentials = credentials
        self.mock_application_code = mock_application_code
        self.timeout = timeout


class OrderIntent(Enum):
    CAPTURE = "CAPTURE"
    AUTHORIZE = "AUTHORIZE"


class Amount:
    def __init__(self, currency_code: str, value: str):
        # Three-character ISO-4217 code. Value is a string so that JPY-like
        # integers and TND-like thousandths survive untouched.
        self.currency_code = currency_code
        self.value = value

    def to_payload(self):
        return {"currency_code": self.currency_code, "value": self.value}


class PurchaseUnit:
    def __init__(self, amount: Amount):
        self.amount = amount

    def to_payload(self):
        return {"amount": self.amount.to_payload()}


class CreateOrderOptions:
    def __init__(self, intent: OrderIntent, purchase_units):
        self.intent = intent
        self.purchase_units = list(purchase_units)

    def to_payload(self):
        return {
            "intent": OrderIntent(self.intent).value,
            "purchase_units": [
                purchase_unit.to_payload() for purchase_unit in self.purchase_units
            ],
        }


class CaptureOrderOptions:
    def __init__(self, order_id: str):
        self.order_id = order_id
