import pytest

from faker import Faker
from unittest.mock import patch, Mock

from paypal_utils import ClientOptions, Credentials, PaypalService

from tests.test_paypal.paypal_sample_data import access_token_sample_response

fake = Faker()
Faker.seed(54321)


@pytest.fixture
def credentials():
    return Credentials(client_id=fake.uuid4(), client_secret=fake.sha256())


@pytest.fixture
def sandbox_options(credentials):
    return ClientOptions(is_sandbox=True, credentials=credentials)


@pytest.fixture
def live_options(credentials):
    return ClientOptions(is_sandbox=False, credentials=credentials)


@pytest.fixture
def paypal_service(sandbox_options):
    return PaypalService(sandbox_options)


@pytest.fixture
def oauth_session_mock():
    with patch("paypal_utils.services.paypal.OAuth2Session") as _fixture:
        _fixture.return_value.fetch_token.return_value = dict(
            access_token_sample_response
        )
        yield _fixture


@pytest.fixture
def requests_mock():
    with patch("paypal_utils.services.paypal.requests") as _fixture:
        yield _fixture


@pytest.fixture
def make_http_response():
    def __make_http_response(data, status_code=200):
        response_mock = Mock()
        response_mock.status_code = status_code
        response_mock.ok = status_code < 400
        response_mock.json.return_value = data
        return response_mock

    return __make_http_response


@pytest.fixture
def make_purchase_unit_payloads():
    def __make(count):
        return [
            {
                "currency_code": fake.currency_code(),
                "value": str(fake.pydecimal(left_digits=3, right_digits=2, positive=True)),
            }
            for i in range(count)
        ]

    return __make
