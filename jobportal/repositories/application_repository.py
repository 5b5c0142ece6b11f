"""
Application repository - data access for Application entity.
"""
from jobportal.models.application import Application
from jobportal.repositories.base import UserJobRepository


class ApplicationRepository(UserJobRepository[Application]):
    def __init__(self):
        super().__init__(Application)
