KEY_RANGE_MESSAGE = "Le code doit être un entier entre 0 et 25 !"


class InvalidKeyError(ValueError):
    """Raised when an encryption key is not an integer between 0 and 25."""

    def __init__(self, key=None, message=KEY_RANGE_MESSAGE):
        super().__init__(message)
        self.key = key
