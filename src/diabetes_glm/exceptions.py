"""
Errors raised by the analysis pipeline, tagged with the failing stage
"""


class PipelineError(Exception):
    """Fatal error in one pipeline stage"""

    def __init__(self, stage, message):
        super().__init__(message)
        self.stage = stage
        self.message = message

    def __str__(self):
        return f"[{self.stage}] {self.message}"


class DataError(PipelineError):
    """Problem with the input data (missing columns, empty data, bad labels)"""


class FittingError(PipelineError):
    """The logistic regression could not be fitted"""

    def __init__(self, message):
        super().__init__('fit', message)
