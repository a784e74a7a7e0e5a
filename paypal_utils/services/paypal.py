import os
import json
import logging
import requests

from requests.auth import HTTPBasicAuth
from oauthlib.oauth2 import BackendApplicationClient
from requests_oauthlib import OAuth2Session

from paypal_utils import config
from paypal_utils.interfaces.payments import PaymentServiceInterface
from paypal_utils.interfaces.payment_information import (
    ClientOptions,
    CreateOrderOptions,
    CaptureOrderOptions,
)
from paypal_utils.interfaces.responses import (
    GenericResponse,
    CreateOrderResponse,
    CaptureOrderResponse,
    OrderDetailsResponse,
)

SANDBOX_API_URL = "https://api-m.sandbox.paypal.com"
LIVE_API_URL = "https://api-m.paypal.com"

logger = logging.getLogger("paypal_service")
logger.setLevel(os.getenv("LOG_LEVEL", "INFO").upper())


def get_base_url(is_sandbox: bool) -> str:
    return SANDBOX_API_URL if is_sandbox else LIVE_API_URL


class PaypalService(PaymentServiceInterface):
    def __init__(self, options: ClientOptions):
        self._credentials = options.credentials
        self._timeout = options.timeout
        self._is_sandbox = bool(options.is_sandbox)
        self.base_url = get_base_url(self._is_sandbox)
        # Only ever sent to the sandbox.
        self._mock_application_code = (
            options.mock_application_code if self._is_sandbox else None
        )

        if options.mock_application_code and not self._is_sandbox:
            logger.warning(
                "Ignoring PayPal mock application code "
                f"{options.mock_application_code}, not in sandbox mode"
            )

    @classmethod
    def from_env(cls):
        return cls(config.options_from_env())

    @property
    def is_sandbox(self):
        return self._is_sandbox

    def generate_access_token(self) -> str:
        """
        @see https://developer.paypal.com/api/rest/authentication/

        A new session per call, tokens are never cached or shared.
        """
        client_id = self._credentials.client_id
        client = BackendApplicationClient(client_id=client_id)
        oauth = OAuth2Session(client=client)

        token_url = f"{self.base_url}/v1/oauth2/token"
        logger.debug(f"POST {token_url}")
        token = oauth.fetch_token(
            token_url=token_url,
            auth=HTTPBasicAuth(client_id, self._credentials.client_secret),
            timeout=self._timeout,
        )
        return token["access_token"]

    def _get_headers(self, access_token):
        headers = {
            "Content-Type": "application/json",
            "Authorization": f"Bearer {access_token}",
        }
        if self._mock_application_code:
            # Forces PayPal to answer with the given error.
            headers["PayPal-Mock-Response"] = json.dumps(
                {"mock_application_codes": self._mock_application_code}
            )

        return headers

    def _log_failure(self, operation, response: GenericResponse):
        if response.ok:
            return

        failure = response.data
        logger.error(
            f"PayPal {operation} failed ({failure.name}, debug_id={failure.debug_id}): "
            f"{failure.get_error_msg()}"
        )

    def create_order(self, options: CreateOrderOptions) -> GenericResponse:
        """
        @see https://developer.paypal.com/docs/api/orders/v2/#orders_create

        Creates an order. The payer approves it through the "approve" link
        of the returned order before it can be captured.
        """
        access_token = self.generate_access_token()
        url = f"{self.base_url}/v2/checkout/orders"
        payload = options.to_payload()

        logger.debug(f"POST {url}")
        http_response = requests.post(
            url,
            headers=self._get_headers(access_token),
            data=json.dumps(payload),
            timeout=self._timeout,
        )
        response = GenericResponse.from_http_response(
            http_response, CreateOrderResponse
        )

        if response.ok:
            logger.info(f"PayPal order {response.data.id} created ({response.data.status})")
        self._log_failure("create order", response)
        return response

    def capture_order(self, options: CaptureOrderOptions) -> GenericResponse:
        """
        @see https://developer.paypal.com/docs/api/orders/v2/#orders_capture

        Captures payment for an order. The buyer must have approved the order
        first, otherwise PayPal answers with a failure response.
        """
        access_token = self.generate_access_token()
        url = f"{self.base_url}/v2/checkout/orders/{options.order_id}/capture"

        logger.debug(f"POST {url}")
        http_response = requests.post(
            url,
            headers=self._get_headers(access_token),
            timeout=self._timeout,
        )
        response = GenericResponse.from_http_response(
            http_response, CaptureOrderResponse
        )

        if response.ok:
            status = getattr(response.data.status, "value", response.data.status)
            logger.info(f"PayPal order {response.data.id} captured ({status})")
        self._log_failure("capture order", response)
        return response

    def show_order_details(self, order_id: str) -> GenericResponse:
        """
        @see https://developer.paypal.com/docs/api/orders/v2/#orders_get
        """
        access_token = self.generate_access_token()
        url = f"{self.base_url}/v2/checkout/orders/{order_id}"

        logger.debug(f"GET {url}")
        http_response = requests.get(
            url,
            headers=self._get_headers(access_token),
            timeout=self._timeout,
        )
        response = GenericResponse.from_http_response(
            http_response, OrderDetailsResponse
        )
        self._log_failure("show order details", response)
        return response
