from __future__ import annotations

from _infra import CRUSTS, SIZES, TOPPINGS, Size, Topping, banner

from comprehensions import For


def describe(size: Size, crust: str, topping: Topping) -> str:
    # "Pure" function of one combination, no loops here.
    return f"{size.name}/{crust}/{topping.name}: {size.price + topping.price}"


def main() -> None:
    banner("01_quickstart: For + yield_")

    menu = For(SIZES, CRUSTS, TOPPINGS).yield_(describe)

    # Nothing computed yet, take only what we print.
    for line in menu.take(4):
        print(line)

    print(f"total combinations: {menu.count()}")


if __name__ == "__main__":
    main()
