"""Data access object: keep a list of orders behind add, update and list operations."""

from __future__ import annotations

from dataclasses import dataclass, field, replace


@dataclass(frozen=True)
class Order:
    """An order: what was bought and its price."""

    name: str
    price: int

    def show(self) -> str:
        return f"订单名称：{self.name}，订单价格：{self.price}"


@dataclass
class OrderList:
    """Stores orders; an order is identified by its name."""

    orders: list[Order] = field(default_factory=list)

    def add_order(self, order: Order) -> None:
        self.orders.append(order)

    def update_order(self, order: Order) -> None:
        """Replace the first order with the same name, or add it if there is none."""
        for position, existing in enumerate(self.orders):
            if existing.name == order.name:
                self.orders[position] = order
                return
        self.add_order(order)

    def get_all_orders(self) -> list[str]:
        """Describe every order, in order."""
        return [order.show() for order in self.orders]


def main(argv=None) -> int:
    orders = OrderList()
    phone = Order("手机", 1999)
    orders.add_order(phone)
    computer = Order("电脑", 7999)
    orders.add_order(computer)
    for line in orders.get_all_orders():
        print(line)

    computer = replace(computer, price=6999)
    orders.update_order(computer)
    for line in orders.get_all_orders():
        print(line)
    return 0


if __name__ == "__main__":
    raise SystemExit(main())