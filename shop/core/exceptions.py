# type: ignore
# pyright: reportMissingImports=false, reportGeneralTypeErrors=false
"""Domain exceptions raised by the service layer."""


class ShopError(Exception):
    """Base class for every error the shop service raises on purpose."""


class NotFoundError(ShopError, LookupError):
    """A requested record does not exist."""


class MemberNotFoundError(NotFoundError):
    def __init__(self, member_id: int):
        self.member_id = member_id
        super().__init__(f"Member {member_id} not found")


class OrderNotFoundError(NotFoundError):
    def __init__(self, order_id: int):
        self.order_id = order_id
        super().__init__(f"Order {order_id} not found")
