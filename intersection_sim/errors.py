class MissingTargetError(LookupError):
    """An output sink could not resolve the target of a command."""

    def __init__(self, target: str):
        super().__init__(f"Output target '{target}' does not exist")
        self.target = target
