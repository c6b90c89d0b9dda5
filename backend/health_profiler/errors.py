"""Request-level failures that end processing before a profile is built."""


class SurveyInputError(Exception):
    status_code = 400
    status = "error"

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message

    def to_body(self) -> dict:
        return {"status": self.status, "message": self.message}


class MissingInput(SurveyInputError):
    def __init__(self, message: str = "Please provide survey data."):
        super().__init__(message)


class TextExtractionFailed(SurveyInputError):
    status_code = 500
    status = "ocr_failed"
