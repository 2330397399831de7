"""Interface layer errors."""

from natter.domain.error import ValidationError


class MissingParameterError(ValidationError):
    """A required query parameter is absent or blank."""

    def __init__(self, parameter: str):
        self.parameter = parameter
        super().__init__(f"Missing {parameter} parameter")
