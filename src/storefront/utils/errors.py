class ConfigurationError(RuntimeError):
    """Raised when a setting required by an endpoint is missing."""

    def __init__(self, setting: str, message: str | None = None):
        super().__init__(message or f"{setting} is not configured")
        self.setting = setting
