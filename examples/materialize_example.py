"""Minimal example calling the materializer directly."""

from formtree import Materializer, materialize


def main() -> None:
    """Materialize a sparse array and compare default and bounded settings."""
    properties = [("items[0]", "first"), ("items[3]", "fourth"), ("items[5]", "sixth")]
    print("default:", materialize(properties))
    print("bounded:", Materializer(max_array_index=4).materialize(properties))
    print("raw strings:", Materializer(coerce=False).materialize([("age", "30")]))


if __name__ == "__main__":
    main()
