class NucleobaseConversionError(ValueError):
    pass


class InvalidCharacterError(NucleobaseConversionError):
    def __init__(self, character: str):
        super().__init__("invalid character: cannot convert {} into a nucleobase".format(character))
        self.character = character


class StringLengthError(NucleobaseConversionError):
    def __init__(self, token: str):
        super().__init__("cannot convert string of length greater than 1 character into a single nucleobase")
        self.token = token
