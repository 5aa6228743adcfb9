class InvalidComparatorError(ValueError):
    def __init__(self, comparator: object) -> None:
        super().__init__(f"Invalid comparator: {comparator!r}")


class InvalidSortingAlgorithmError(Exception):
    def __init__(self, name: str) -> None:
        super().__init__("Invalid sorting algorithm: " + name)
