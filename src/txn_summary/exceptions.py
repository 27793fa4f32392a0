class TxnSummaryError(Exception):
    pass

class ConfigurationError(TxnSummaryError):
    pass

class IngestError(TxnSummaryError):
    def __init__(self, message: str, *, line: int | None = None, value: str | None = None):
        self.line = line
        self.value = value
        super().__init__(f"line {line}: {message}" if line is not None else message)

class HeaderError(IngestError):
    pass

class FieldCountError(IngestError):
    pass

class DateFormatError(IngestError):
    pass

class AmountFormatError(IngestError):
    pass

class EmptyContentError(IngestError):
    pass

class ReadError(IngestError):
    pass
