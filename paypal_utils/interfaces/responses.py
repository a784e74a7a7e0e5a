from enum import Enum


class Link:
    def __init__(self, data):
        self.href = data.get("href")
        self.rel = data.get("rel")
        self.method = data.get("method")

    def __repr__(self):
        return f"Link(rel={self.rel!r}, method={self.method!r}, href={self.href!r})"


def _links(data):
    return [Link(link) for link in data.get("links") or []]


class ErrorDetail:
    def __init__(self, data):
        self.issue = data.get("issue")
        self.description = data.get("description")


class FailureResponse:
    """
    @see https://developer.paypal.com/api/rest/responses/
    """

    def __init__(self, data):
        self.raw = data
        self.name = data.get("name")
        self.message = data.get("message")
        self.debug_id = data.get("debug_id")
        self.details = [ErrorDetail(detail) for detail in data.get("details") or []]
        self.links = _links(data)

    def get_error_msg(self):
        if self.details:
            return f"{self.details[0].issue}: {self.details[0].description}"

        return f"{self.name}: {self.message}"


class OrderStatus(Enum):
    # The order was created with the specified context.
    CREATED = "CREATED"
    # The order was saved and persisted. It stays in progress until a capture
    # is made with final_capture = true for all purchase units.
    SAVED = "SAVED"
    # The customer approved the payment.
    APPROVED = "APPROVED"
    # All purchase units in the order are voided.
    VOIDED = "VOIDED"
    # The payment was authorized or the authorized payment was captured.
    COMPLETED = "COMPLETED"
    # The payer must act first (e.g. 3DS). Redirect them to the
    # "payer-action" link; some payment sources handle this themselves.
    PAYER_ACTION_REQUIRED = "PAYER_ACTION_REQUIRED"

    @classmethod
    def parse(cls, value):
        """Unknown statuses are returned as the raw string."""
        try:
            return cls(value)
        except ValueError:
            return value


class OrderResponse:
    def __init__(self, data):
        self.raw = data
        self.id = data.get("id")
        self.status = data.get("status")
        self.links = _links(data)

    def get_link(self, rel):
        for link in self.links:
            if link.rel == rel:
                return link

        return None


class CreateOrderResponse(OrderResponse):
    """
    @see https://developer.paypal.com/docs/api/orders/v2/#orders_create
    """


class CaptureOrderResponse(OrderResponse):
    """
    @see https://developer.paypal.com/docs/api/orders/v2/#orders_capture

    Only id, status and links are modelled, anything else is in `raw`.
    """

    def __init__(self, data):
        super().__init__(data)
        self.status = OrderStatus.parse(self.status)


class OrderDetailsResponse(CaptureOrderResponse):
    """
    @see https://developer.paypal.com/docs/api/orders/v2/#orders_get
    """


class GenericResponse:
    """
    Either ok=True with the operation's response data, or ok=False with a
    FailureResponse. `ok` mirrors the HTTP response's own success flag.
    """

    def __init__(self, ok: bool, data):
        self.ok = ok
        self.data = data

    @classmethod
    def from_http_response(cls, response, success_class):
        data = response.json()
        if response.ok:
            return cls(True, success_class(data))

        return cls(False, FailureResponse(data))

    def __bool__(self):
        return self.ok

    def __repr__(self):
        return f"GenericResponse(ok={self.ok!r}, data={self.data!r})"
