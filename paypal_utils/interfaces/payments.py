import abc

from .payment_information import CreateOrderOptions, CaptureOrderOptions


class PaymentServiceInterface(metaclass=abc.ABCMeta):
    @classmethod
    def __subclasshook__(cls, subclass):
        return (
            hasattr(subclass, "create_order")
            and callable(subclass.create_order)
            and hasattr(subclass, "capture_order")
            and callable(subclass.capture_order)
            or NotImplemented
        )

    @abc.abstractmethod
    def create_order(self, options: CreateOrderOptions):
        raise NotImplementedError

    @abc.abstractmethod
    def capture_order(self, options: CaptureOrderOptions):
        raise NotImplementedError
