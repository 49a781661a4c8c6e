from credgate.application.services.authentication_service import Authenticator

__all__ = ["Authenticator"]
