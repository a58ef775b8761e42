from __future__ import annotations

from _infra import CRUSTS, SIZES, TOPPINGS, Failure, Size, Topping, banner

from comprehensions import For
from kungfu import Error, Ok, Result


def vegan_price(size: Size, crust: str, topping: Topping) -> Result[int, Failure]:
    if not topping.vegan:
        return Error(Failure(f"{topping.name} is not vegan"))
    return Ok(size.price + topping.price + (50 if crust == "thin" else 0))


def main() -> None:
    banner("02_results: yield_result / traverse / yield_catching")

    comprehension = For(SIZES, CRUSTS, TOPPINGS)

    for result in comprehension.yield_result(vegan_price).take(3):
        match result:
            case Ok(price):
                print(f"ok: {price}")
            case Error(err):
                print(f"error: {err}")

    # Stops at salami, later combinations are never priced.
    match comprehension.traverse(vegan_price):
        case Ok(prices):
            print(f"all prices: {prices}")
        case Error(err):
            print(f"traverse stopped: {err}")

    ratios = For([2, 0, 4], [8]).yield_catching(lambda d, n: n // d, on_error=repr)
    print(f"ratios: {ratios.to_list()!r}")


if __name__ == "__main__":
    main()
