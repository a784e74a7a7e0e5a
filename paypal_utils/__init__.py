from paypal_utils.interfaces.payment_information import (
    Credentials,
    ClientOptions,
    OrderIntent,
    Amount,
    PurchaseUnit,
    CreateOrderOptions,
    CaptureOrderOptions,
)
from paypal_utils.interfaces.responses import (
    Link,
    ErrorDetail,
    FailureResponse,
    OrderStatus,
    CreateOrderResponse,
    CaptureOrderResponse,
    OrderDetailsResponse,
    GenericResponse,
)
from paypal_utils.interfaces.payments import PaymentServiceInterface
from paypal_utils.services.paypal import PaypalService, get_base_url
