class ZipfError(ValueError):
    message = "Invalid Zipf parameter"

    def __init__(self, message: str = "") -> None:
        super().__init__(message or self.message)


class InvalidExponent(ZipfError):
    message = "Exponent must be greater than 1"


class InvalidStart(ZipfError):
    message = "Start must be >= 1"


# reserved, no constructor validates max_index yet
class InvalidMax(ZipfError):
    message = "Invalid max"
