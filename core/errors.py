"""Error taxonomy for decoding roots and solving test cases."""


class SolverError(Exception):
    """Base class for every error raised by this project."""


class DecodeError(SolverError, ValueError):
    """A (base, digits) pair could not be decoded into an integer."""


class InvalidBase(DecodeError):
    def __init__(self, value):
        self.value = value
        super().__init__(f"Invalid base {value!r}. Supported range: 2..36")


class EmptyValue(DecodeError):
    def __init__(self, value: str):
        self.value = value
        super().__init__(f"Empty value {value!r}: no digits after sign")


class InvalidDigitChar(DecodeError):
    def __init__(self, char: str):
        self.char = char
        super().__init__(f"Invalid digit character: {char!r}")


class DigitOutOfRange(DecodeError):
    def __init__(self, char: str, base: int):
        self.char = char
        self.base = base
        super().__init__(f"Digit {char!r} not valid for base {base}")


class CaseError(SolverError):
    """A single test case cannot be solved. Other cases are unaffected."""


class InvalidCase(CaseError):
    pass


class InsufficientRoots(CaseError):
    def __init__(self, needed: int, found: int):
        self.needed = needed
        self.found = found
        super().__init__(
            f"Not enough roots for this test: need {needed}, found {found}")


class DocumentError(SolverError):
    """The input document as a whole is unusable; the run is aborted."""
