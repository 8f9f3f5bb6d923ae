"""Minimal example materializing a URL query string."""

from formtree import QuerySource


def main() -> None:
    """Parse bracketed and repeated query parameters into a nested tree."""
    source = QuerySource("user[name]=John&user[address][zip]=02134&tags=go&tags=http&page=2")
    tree = source.to_dict()
    print(f"{tree=}")
    print("zip stays text:", tree["user"]["address"]["zip"])
    print("json:", source.to_json(indent=2))


if __name__ == "__main__":
    main()
