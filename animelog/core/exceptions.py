from fastapi import status

NOT_AUTHENTICATED = "Not authenticated"

class BaseAppException(Exception):
    """Base exception for application"""
    def __init__(self, message: str, status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)

class ValidationException(BaseAppException):
    """Raised when a required field is missing or too short"""
    def __init__(self, message: str = "All fields are required"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class UserNotFoundException(BaseAppException):
    """Raised when user is not found"""
    def __init__(self, message: str = "User not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)

class UserAlreadyExistsException(BaseAppException):
    """Raised when user already exists"""
    def __init__(self, message: str = "Email already in use"):
        super().__init__(message, status.HTTP_400_BAD_REQUEST)

class InvalidCredentialsException(BaseAppException):
    """Raised when credentials are invalid"""
    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message, status.HTTP_401_UNAUTHORIZED)

class AnimeNotFoundException(BaseAppException):
    """Raised when the catalog has no anime for an id"""
    def __init__(self, message: str = "Anime not found"):
        super().__init__(message, status.HTTP_404_NOT_FOUND)
