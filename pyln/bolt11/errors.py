class Bolt11Error(ValueError):
    """Base class for every error raised by the tagged-field codec.
    """


class ParseAmountError(Bolt11Error):
    def __init__(self, amount):
        super(ParseAmountError, self).__init__("Invalid amount '{}'".format(amount))
        self.amount = amount


class InvalidUtf8Error(Bolt11Error):
    pass


class InvalidLengthError(Bolt11Error):
    pass


class SerializationFault(Bolt11Error):
    """A fixed-width field writer could not represent a value.

    Should never be seen when the tag was built from decoded data, so it
    usually points at a caller constructing out-of-range values.
    """


class TruncatedInputError(Bolt11Error):
    def __init__(self, what, needed, available):
        super(TruncatedInputError, self).__init__(
            "{}: need {} items, only {} available".format(what, needed, available)
        )
        self.needed = needed
        self.available = available


class InvalidPaddingError(Bolt11Error):
    pass


class InvalidWordError(Bolt11Error):
    pass
