from user_api.infrastructure.database.models.user_model import UserModel

__all__ = ["UserModel"]
