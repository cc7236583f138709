# engine/exceptions.py

class AnalyzerError(Exception):
    pass


class CommandError(AnalyzerError):
    pass
