class TopwordsError(RuntimeError):
    """Base class for failures that abort a whole run."""


class EngineInitializationError(TopwordsError):
    pass


class ParallelismUnavailableError(TopwordsError):
    pass
