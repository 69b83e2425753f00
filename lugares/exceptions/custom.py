class PlacesApiError(Exception):
    def __init__(self, message: str, status_code: int | None = None):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class RateLimitError(Exception):
    def __init__(self, service: str):
        self.service = service
        super().__init__(f"Rate limit exceeded for {service}")


class IntentDispatchError(Exception):
    def __init__(self, message: str, uri: str | None = None):
        self.message = message
        self.uri = uri
        super().__init__(message)


class NavigationError(Exception):
    def __init__(self, message: str):
        self.message = message
        super().__init__(message)
