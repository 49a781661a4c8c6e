from credgate_auth.persistence.sqlalchemy.models.credential_model import CredentialModel

__all__ = ["CredentialModel"]
