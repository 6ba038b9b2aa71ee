from tutorhub.client.api_client import ApiClient, ApiError

__all__ = ["ApiClient", "ApiError"]
