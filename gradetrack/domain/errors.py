class GradeTrackError(ValueError):
    pass


class InvalidGradeLabel(GradeTrackError):
    def __init__(self, label: str) -> None:
        super().__init__(f"Unsupported letter grade: {label!r}")
        self.label = label


class UnknownSubjectCode(GradeTrackError):
    def __init__(self, code: str) -> None:
        super().__init__(f"Unknown subject code: {code!r}")
        self.code = code
