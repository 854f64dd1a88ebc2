class DivisionByZero(ZeroDivisionError):
    pass


class ReconstructionError(ValueError):
    """The secret could not be recovered from the supplied shares."""


class InsufficientShares(ReconstructionError):
    def __init__(self: "InsufficientShares", available: int, required: int) -> None:
        super().__init__(
            f"Not enough shares to reconstruct ({available} < {required})."
        )
        self.available = available
        self.required = required


class NoConsistentReconstruction(ReconstructionError):
    def __init__(self: "NoConsistentReconstruction", k: int) -> None:
        super().__init__(f"No subset of {k} shares yields an integer secret.")
        self.k = k


class InvalidDigit(ValueError):
    def __init__(self: "InvalidDigit", char: str, base: int) -> None:
        super().__init__(f"Invalid digit {char!r} for base {base}.")
        self.char = char
        self.base = base


class MalformedShareFile(ValueError):
    pass
