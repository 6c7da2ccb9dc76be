ERR_BUSY = "ERR_BUSY"
ERR_TIMEOUT = "ERR_TIMEOUT"
ERR_UNKNOWN = "ERR_UNKNOWN"
ERR_INVALID_POPULATION = "ERR_INVALID_POPULATION"
ERR_ORACLE = "ERR_ORACLE"


class LocateError(Exception):
    code = ERR_UNKNOWN


class InvalidPopulation(LocateError, ValueError):
    """The coin set is empty, has duplicates, or cannot be reduced to a base case."""
    code = ERR_INVALID_POPULATION


class OracleFailure(LocateError):
    """A weighing could not be performed or its result could not be read."""
    code = ERR_ORACLE
