class FindrError(Exception):
    # base exception for all application-specific errors.
    pass

class ConfigError(FindrError):
    # errors related to configuration, e.g. a name pattern that does not compile.
    pass

class OutputError(FindrError):
    # errors during output operations.
    pass
