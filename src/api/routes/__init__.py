from api.routes.documents import DocumentController
from api.routes.profile import ProfileController

__all__ = ["DocumentController", "ProfileController"]
