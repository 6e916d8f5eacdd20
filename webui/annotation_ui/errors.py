"""
Error types for the annotation WebUI
Author: Cascade (AI assistant)

Each error carries the HTTP status the routers answer with, so the
browser side always receives an explicit signal instead of a silent failure.
"""


class PortError(Exception):
    """Base class for failures at the front-end/environment boundary."""

    status_code = 400

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ElementNotFoundError(PortError):
    status_code = 404

    def __init__(self, element_id: str):
        super().__init__(f"No layout reported for element '{element_id}'")
        self.element_id = element_id


class InvalidLayoutError(PortError):
    status_code = 422


class ImageDecodeError(PortError):
    status_code = 422


class ImageTooLargeError(PortError):
    status_code = 413


class ObjectUrlNotFoundError(PortError):
    status_code = 404

    def __init__(self, token: str):
        super().__init__(f"Unknown or revoked object URL: {token}")
        self.token = token
